"""Run the GCD server: python -m src"""

from src.api.main import run

run()
