"""
List and relist unsold Allegro items

Logs in with the credentials from .env (ALLEGRO_LOGIN, ALLEGRO_PASSWORD,
ALLEGRO_API_KEY), prints the unsold items and, with --republish, lists them
again with their previous auction duration.
"""
import argparse
import os
import sys
from dotenv import load_dotenv

sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))
load_dotenv()

from zeep.exceptions import Fault  # noqa: E402

from allegro_webapi import (  # noqa: E402
    AllegroClient,
    AuthError,
    ConfigurationError,
    NothingToRepublish,
    get_config,
)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="List and relist unsold Allegro items")
    parser.add_argument('--sandbox', action='store_true', help="use the WebAPI sandbox")
    parser.add_argument('--country', type=int, help="country id (default: ALLEGRO_COUNTRY_ID or 1)")
    parser.add_argument('--republish', action='store_true', help="relist every unsold item")
    return parser.parse_args(argv)


def print_items(client: AllegroClient):
    items = client.not_sold_items()
    if not items:
        print("No unsold items.")
        return
    print(f"{len(items)} unsold item(s):")
    for item in items:
        print(f"  {item.item_id}  ({item.duration_days} days)")


def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)

    try:
        config = get_config()
        sandbox = True if args.sandbox else None
        client = AllegroClient(sandbox=sandbox, config=config)
        if args.country is not None:
            client.set_country_id(args.country)

        client.connect_from_config()
        print(f"✓ Logged in as {config.allegro_login}")
        print()

        print_items(client)

        if args.republish:
            print()
            result = client.republish_not_sold_items()
            if isinstance(result, NothingToRepublish):
                print(result.message)
            else:
                print(f"✓ Relisted {len(result.responses)} item(s)")
        return 0

    except ConfigurationError as e:
        print(f"❌ Configuration Error: {e}")
        print()
        print("Make sure your .env file has:")
        print("  ALLEGRO_LOGIN=your_login")
        print("  ALLEGRO_PASSWORD=your_password")
        print("  ALLEGRO_API_KEY=your_webapi_key")
        return 1

    except AuthError as e:
        print(f"❌ Login failed: {e}")
        return 1

    except Fault as e:
        print(f"❌ WebAPI error {e.code}: {e.message}")
        return 1

    except KeyboardInterrupt:
        print("\n\nCancelled by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
