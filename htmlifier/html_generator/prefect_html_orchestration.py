"""
HTMLify Orchestration
Converts the project named in a configuration file and saves the result

htmlifier --config config/htmlifier_config.yaml --run
"""

import argparse
import time
from typing import Dict, Any, Optional

from prefect import flow, task, get_run_logger

from .htmlifier import Htmlifier
from .renderers.html_renderer import HtmlRenderer, OutputBlob
from ..config.config_manager import ConfigManager
from ..utils.common import generate_timestamp
from ..utils.exceptions import HtmlifierError
from ..utils.logging_config import setup_logging, create_log_callback


@task(
    name="load_htmlify_config",
    description="Load and validate the HTMLifier configuration"
)
def load_htmlify_config_task(config_path: str) -> ConfigManager:
    """Load the configuration and set up logging from it"""
    logger = get_run_logger()

    config = ConfigManager(config_path)
    setup_logging(config.get_logging_config())

    for key, value in config.get_config_summary().items():
        logger.info(f"  - {key}: {value}")

    return config


@task(
    name="htmlify_project",
    description="Convert the configured project to HTML or a zip",
    retries=1
)
def htmlify_project_task(config: ConfigManager) -> Dict[str, Any]:
    """Run one conversion"""
    logger = get_run_logger()
    task_start_time = time.time()

    htmlifier = Htmlifier(config.get_runtime_config())
    options = config.get_htmlify_options(create_log_callback())
    blob = htmlifier.htmlify(config.get_project_source(), options)

    task_duration = time.time() - task_start_time
    logger.info(f"Created {blob.mime_type} output ({blob.size:,} bytes) in {task_duration:.2f}s")

    return {
        'blob': blob,
        'title': options.title,
        'performance_metrics': {
            'htmlify_duration': task_duration
        }
    }


@task(
    name="save_output",
    description="Write the converted project to disk"
)
def save_output_task(config: ConfigManager, blob: OutputBlob, title: str,
                     output_path: Optional[str] = None) -> Dict[str, Any]:
    """Save the artifact and summarise it"""
    logger = get_run_logger()

    renderer = HtmlRenderer(config.get_output_config())
    saved_file = renderer.save_output(blob, title, output_path)
    logger.info(f"Saved output to {saved_file}")

    return renderer.get_output_summary(saved_file, blob)


@flow(
    name="htmlify-project",
    description="Convert a project to a standalone HTML page or zip",
    version="1.0.0",
    timeout_seconds=600
)
def htmlify_flow(config_path: str, output_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration, convert the project and save the result"""
    logger = get_run_logger()
    logger.info("Starting HTMLify")

    try:
        config = load_htmlify_config_task(config_path)
        conversion = htmlify_project_task(config)
        output_summary = save_output_task(config, conversion['blob'], conversion['title'], output_path)

        summary = {
            'pipeline_status': 'SUCCESS',
            'execution_timestamp': generate_timestamp(),
            'total_execution_time_seconds': conversion['performance_metrics']['htmlify_duration'],
            'output_summary': output_summary
        }

        logger.info("HTMLify completed successfully!")
        return summary

    except HtmlifierError as e:
        logger.error(f"HTMLify failed: {e}")
        return {
            'pipeline_status': 'FAILED',
            'error': str(e),
            'execution_timestamp': generate_timestamp(),
            'total_execution_time_seconds': 0,
            'output_summary': {}
        }


def main():
    """CLI for HTMLify"""
    parser = argparse.ArgumentParser(description="Convert a project to a standalone HTML page")
    parser.add_argument("--config", required=True, help="Path to configuration file")
    parser.add_argument("--output", help="Output file path (defaults to the configured output directory)")
    parser.add_argument("--run", action="store_true", help="Run the conversion")

    args = parser.parse_args()

    if args.run:
        result = htmlify_flow(args.config, args.output)

        if result['pipeline_status'] == 'SUCCESS':
            print(f"Saved {result['output_summary']['file']}")
            print(f"Size: {result['output_summary']['total_size_mb']} MB")
            print(f"Duration: {result['total_execution_time_seconds']:.2f}s")
            return 0
        else:
            print(f"Failed: {result.get('error', 'Unknown error')}")
            return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
