import logging
from typing import Optional

from user_onboarding.core.store import ProfileStore
from user_onboarding.data import database
from user_onboarding.ui import views, parser, colors


def setup_logging(storage_dir=None):
    """
    Configure logging to file within application storage directory.

    Creates log file in ~/.user_onboarding/onboarding_activity.log with timestamps,
    or in storage_dir when one is given.
    """
    logging.basicConfig(
        filename=database.get_log_file_path(storage_dir),
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def start_application(argv=None):
    """
    Main application entry point.

    Flow:
    1. Parse arguments
    2. Setup logging
    3. Open the profile store
    4. Run the selected command
    5. Close the store on exit
    """
    args = parser.initialize_parser().parse_args(argv)

    store: Optional[ProfileStore] = None

    try:
        setup_logging(args.storage_dir)
        logging.info("Application starting")

        store = ProfileStore.open(database.get_storage_db_path(args.storage_dir))
        args.func(args, store)

    except (KeyboardInterrupt, EOFError):
        print(
            f"\n\n{colors.Colors.WARNING}Session interrupted by user.{colors.Colors.RESET}"
        )
        logging.info("Session interrupted by user")

    except Exception as e:
        views.show_error(f"A critical error occurred: {e}")
        logging.exception("Critical error in main execution loop")

    finally:
        if store:
            try:
                store.close()
            except Exception as e:
                logging.error(f"Error closing store: {e}")

        logging.info("Application shutdown")


if __name__ == "__main__":
    start_application()
