"""Allow running as ``python -m clipkeeper``."""

from clipkeeper.cli.main import main

if __name__ == "__main__":
    main()
