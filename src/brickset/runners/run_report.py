from pathlib import Path
from typing import Optional

from brickset.config.loader import get_dataset_path, resolve_config
from brickset.ingestion.dataset_loader import load_dataset
from brickset.output.report import build_report, render_json, render_markdown
from brickset.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def main(config_path: Optional[Path] = None, output_format: str = "md", dataset_path: Optional[Path] = None) -> None:
    """
    Report pipeline:

    - load config
    - load the dataset once
    - run every query with the configured parameters
    - print JSON or markdown
    """
    config = resolve_config(config_path)
    path = dataset_path or get_dataset_path(config)

    dataset = load_dataset(path)
    report = build_report(dataset, config["queries"])

    logger.info(f"Built report for {report['total_sets']} sets")
    if output_format == "json":
        print(render_json(report))
    else:
        print(render_markdown(report))


if __name__ == "__main__":
    configure_logging()
    main()
