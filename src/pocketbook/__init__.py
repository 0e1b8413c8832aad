"""pocketbook: personal budget tracker."""

__version__ = "0.1.0"


def __getattr__(name):
    # Resolved on first access so importing the package does not pull in click
    if name == "main":
        from pocketbook.cli.main import main

        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
