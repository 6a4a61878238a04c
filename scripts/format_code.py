#!/usr/bin/env python3
import subprocess
from pathlib import Path


def main():
    project_root = Path(__file__).parent.parent
    python_files = [
        *(project_root / "src").glob("**/*.py"),
        *(project_root / "tests").glob("**/*.py"),
    ]

    print(f"Formatting {len(python_files)} Python files for dirsize...")

    subprocess.run(["isort", *python_files], check=True)
    subprocess.run(["black", *python_files], check=True)

    print("Running flake8 for style verification...")
    subprocess.run(["flake8", "--max-line-length", "100", *python_files], check=False)


if __name__ == "__main__":
    main()
