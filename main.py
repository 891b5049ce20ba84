# Main.py
""""" Entry point for the arithmetic expression calculator.

   Responsibilities:
   - Verify required files exist
   - Load configuration and set up logging
   - Start the console front end (or evaluate a single expression)

"""""
import logging
import sys
from pathlib import Path

from arithmetic_engine import config_manager as config_manager, Console as Console

PROJECT_ROOT = Path(__file__).resolve().parent


def check_files_exist():

    """
      Fail fast if required engine files are missing / moved / renamed.
    """

    modules_dir = PROJECT_ROOT / "arithmetic_engine"

    REQUIRED = [
        modules_dir / "Tokenizer.py",
        modules_dir / "ShuntingYard.py",
        modules_dir / "PostfixEvaluator.py",
        modules_dir / "MathEngine.py",
        modules_dir / "Console.py",
        modules_dir / "config_manager.py",
    ]

    missing_files = []
    for file_path in REQUIRED:
        if not file_path.exists():
            missing_files.append(file_path.name)

    if missing_files:
        print("Error: The following files are missing or in the wrong location:")
        for file_name in missing_files:
            print(f"- {file_name}")
        sys.exit(1)


def configure_logging(settings):
    level = logging.DEBUG if settings.get("debug") else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")


def main():

    """
    Load configuration and start the console.
    - Keep this thin: no business logic here.
    """

    all_settings = config_manager.load_setting_value("all")
    configure_logging(all_settings)
    logging.getLogger(__name__).debug("Config loaded: %s", all_settings)

    # Delegate control to the console; it owns the read loop.
    return Console.main(settings=all_settings)


if __name__ == "__main__":
    check_files_exist()
    sys.exit(main())
