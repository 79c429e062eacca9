import logging
import logging.config
from pathlib import Path
import yaml

def setup_logging(verbose: bool = False, config_path: Path = Path("configs/logging.yaml")):
    """Setup logging configuration from configs/logging.yaml."""
    level = logging.DEBUG if verbose else logging.INFO

    if config_path.exists():
        try:
            with open(config_path, 'rt') as f:
                config_data = yaml.safe_load(f.read())
            logging.config.dictConfig(config_data)
            logging.getLogger("docseed").setLevel(level)
        except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
            logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s')
            logging.warning(f"Failed to load logging config from {config_path}: {e}. Using basic config.")
    else:
        logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s')
        logging.getLogger("docseed").setLevel(level)

    if not verbose:
        logging.getLogger("asyncio").setLevel(logging.WARNING)
