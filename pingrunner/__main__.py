"""
PingRunner - ping wrapper with a serialized async probe engine

Entry point for running as a module:
    python -m pingrunner <target>
"""

from .cli import main

if __name__ == '__main__':
    main()
