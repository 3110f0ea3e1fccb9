"""Command line entry point."""

import httpx
import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console

from src.shopnest.core.logs import configure_logging
from src.shopnest.runtime.config.config_data import ConfigData
from src.shopnest.runtime.config.config_template import load_config
from src.shopnest.runtime.context import set_config
from src.shopnest.runtime.settings import EnvironmentVariables
from src.shopnest.storefront import run_storefront

app = typer.Typer(
    help="ShopNest storefront demo",
    add_completion=False,
)

console = Console()


def load_settings() -> EnvironmentVariables:
    """Read environment settings, falling back to defaults when they are invalid."""
    try:
        return EnvironmentVariables()
    except ValidationError as e:
        logger.warning(f"Ignoring invalid environment settings: {e}")
        return EnvironmentVariables.model_construct()


def load_runtime_config(env: EnvironmentVariables) -> ConfigData:
    """Load config.yaml plus environment overrides, or defaults if that fails."""
    try:
        return env.apply_overrides(load_config(env.config_path))
    except ValueError as e:
        logger.warning(f"Using default configuration: {e}")
        return ConfigData()


@app.command()
def demo() -> None:
    """Build a cart, print the order summary and call the demo API."""
    env = load_settings()
    configure_logging(env.log_level or "WARNING")
    config = load_runtime_config(env)
    set_config(config)
    configure_logging(config.logging.level)
    logger.debug(f"Running storefront in {env.environment} environment")

    with httpx.Client() as http_client:
        run_storefront(console, http_client, config=config)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
