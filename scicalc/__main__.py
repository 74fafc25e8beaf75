"""Entry point: python -m scicalc"""

from .app import main

if __name__ == "__main__":
    main()
