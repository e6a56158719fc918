"""
Main script for the newsletter mailing list store.

This script provides operator commands against the subscriptions table:
1. Adds a subscriber to a newsletter
2. Removes a subscriber from a newsletter
3. Lists the subscribers of a newsletter
4. Creates the subscriptions table
"""

import argparse
import sys
from typing import List, Optional

from config.logger import logger, setup_logging
from src.config import StoreConfig
from src.mailing_list import SubscriberStore, create_subscribers_table

# Initialize logger
logger = logger.getChild(__name__)

def add_subscriber(config, newsletter, email):
    """
    Add a subscriber to a newsletter.

    Args:
        config: StoreConfig for the subscriptions table
        newsletter: Newsletter name
        email: Subscriber's email address

    Returns:
        True if successful, False otherwise
    """
    try:
        store = SubscriberStore.from_config(config)
        store.add_subscriber(newsletter, email)
        return True

    except Exception as e:
        logger.error(f"Failed to add subscriber {email}: {str(e)}")
        return False

def remove_subscriber(config, newsletter, email):
    """
    Remove a subscriber from a newsletter.

    Args:
        config: StoreConfig for the subscriptions table
        newsletter: Newsletter name
        email: Subscriber's email address

    Returns:
        True if successful, False otherwise
    """
    try:
        store = SubscriberStore.from_config(config)
        store.remove_subscriber(newsletter, email)
        return True

    except Exception as e:
        logger.error(f"Failed to remove subscriber {email}: {str(e)}")
        return False

def list_subscribers(config, newsletter) -> Optional[List[str]]:
    """
    List the subscribers of a newsletter.

    Returns:
        List of email addresses, or None if the lookup failed
    """
    try:
        store = SubscriberStore.from_config(config)
        return store.get_subscribers(newsletter)

    except Exception as e:
        logger.error(f"Failed to list subscribers for {newsletter}: {str(e)}")
        return None

def create_table(config):
    """Create the subscriptions table. Returns True if successful."""
    try:
        create_subscribers_table(config)
        return True

    except Exception as e:
        logger.error(f"Failed to create table {config.table_name}: {str(e)}")
        return False

def main(argv=None):
    """
    Main function to parse arguments and run the appropriate command.

    Returns:
        Process exit status
    """
    parser = argparse.ArgumentParser(description="Newsletter Mailing List")
    parser.add_argument("--table", help="Subscriptions table name (defaults to SUBSCRIBERS_TABLE_NAME)")

    # Create subparsers for different commands
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Subscriber management commands
    add_parser = subparsers.add_parser("add", help="Add a subscriber")
    add_parser.add_argument("newsletter", help="Newsletter name")
    add_parser.add_argument("email", help="Subscriber's email address")

    remove_parser = subparsers.add_parser("remove", help="Remove a subscriber")
    remove_parser.add_argument("newsletter", help="Newsletter name")
    remove_parser.add_argument("email", help="Subscriber's email address")

    list_parser = subparsers.add_parser("list", help="List subscribers of a newsletter")
    list_parser.add_argument("newsletter", help="Newsletter name")

    # Table provisioning command
    subparsers.add_parser("create-table", help="Create the subscriptions table")

    # Parse arguments
    args = parser.parse_args(argv)
    config = StoreConfig.from_env(table_name=args.table)

    # Run the appropriate command
    if args.command == "add":
        success = add_subscriber(config, args.newsletter, args.email)
    elif args.command == "remove":
        success = remove_subscriber(config, args.newsletter, args.email)
    elif args.command == "list":
        emails = list_subscribers(config, args.newsletter)
        success = emails is not None
        if success:
            print(f"Total subscribers: {len(emails)}")
            for email in emails:
                print(email)
    elif args.command == "create-table":
        success = create_table(config)
    else:
        parser.print_help()
        return 1

    return 0 if success else 1

if __name__ == "__main__":
    setup_logging()
    sys.exit(main())
