import sys

from .setup import setup_session
from .cli import run_trainer


def main() -> None:
    try:
        session = setup_session()
    except (ValueError, OSError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    try:
        run_trainer(session)
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye.")


if __name__ == "__main__":
    main()
