"""
Vibe Builder - Natural Language CLI

Usage:
    python main.py                                  # Interactive mode
    python main.py chat "/build-my-app a todo app"  # Single command
    python main.py --help                           # Show help
"""

from vibe_builder.cli import app

if __name__ == "__main__":
    app()
