#!/usr/bin/env python3
"""
Development tasks for controllerql.

    python dev_tasks.py <command>
"""

import os
import shutil
import subprocess
import sys

SOURCES = "controllerql tests examples"


def run_command(command, check=True):
    print(f"Running: {command}")
    result = subprocess.run(command, shell=True, check=check)
    return result.returncode == 0


def clean():
    for path in ["build", "dist", ".pytest_cache", ".mypy_cache", "htmlcov"]:
        shutil.rmtree(path, ignore_errors=True)
    for root, dirs, _files in os.walk("."):
        for d in list(dirs):
            if d == "__pycache__" or d.endswith(".egg-info"):
                shutil.rmtree(os.path.join(root, d), ignore_errors=True)
                dirs.remove(d)
    print("Clean completed.")


def format_code():
    run_command(f"black {SOURCES}")
    run_command(f"isort {SOURCES}")


def lint():
    ok = run_command("mypy controllerql", check=False)
    ok = run_command(f"flake8 {SOURCES}", check=False) and ok
    if not ok:
        print("Linting failed.")
        sys.exit(1)


def test():
    run_command("pytest -v --cov=controllerql --cov-report=term")


def build():
    clean()
    run_command("python -m build")


def install_dev():
    run_command("pip install -e .[dev,test]")


COMMANDS = {
    "clean": clean,
    "format": format_code,
    "lint": lint,
    "test": test,
    "build": build,
    "install-dev": install_dev,
}


def main():
    if len(sys.argv) < 2 or sys.argv[1] not in COMMANDS:
        print("Usage: python dev_tasks.py <command>")
        print("Commands: " + ", ".join(COMMANDS))
        sys.exit(1)
    COMMANDS[sys.argv[1]]()


if __name__ == "__main__":
    main()
