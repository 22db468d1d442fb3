import logging
from pathlib import Path
from typing import Optional

import click
import uvicorn

from config import LOG_LEVELS
from config import ConfigError
from config import ServerConfig
from server import app


logger = logging.getLogger(__name__)


def load_config(config: Optional[str]) -> ServerConfig:
    if config is None:
        return ServerConfig()

    config_path = Path(config)
    if not config_path.is_absolute():
        config_path = Path.cwd() / config_path
    return ServerConfig.load(config_path)


@click.group()
def cli():
    pass


@cli.command()
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, readable=True),
    help="YAML file with host, port and log_level keys.",
)
@click.option("--host", type=str)
@click.option("--port", type=int)
@click.option("--log-level", type=click.Choice(LOG_LEVELS))
def serve(
    config: Optional[str],
    host: Optional[str],
    port: Optional[int],
    log_level: Optional[str],
) -> None:
    try:
        server_config = load_config(config)
        server_config = server_config.override(
            host=host,
            port=port,
            log_level=log_level,
        )
    except ConfigError as e:
        raise click.UsageError(str(e)) from e

    level = server_config.log_level
    logging.basicConfig(level=logging.DEBUG if level == "trace" else level.upper())
    logger.info("serving on http://%s:%d", server_config.host, server_config.port)
    uvicorn.run(
        app,
        host=server_config.host,
        port=server_config.port,
        log_level=server_config.log_level,
    )


if __name__ == "__main__":
    cli()
