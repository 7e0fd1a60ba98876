"""
Entry point for running idoitclient as a module: python -m idoitclient
"""

from idoitclient.cli.commands import app

if __name__ == "__main__":
    app()
