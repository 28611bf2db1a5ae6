# markledger/__main__.py
from markledger.cli.cli import app

if __name__ == "__main__":
    app()
