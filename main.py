#!/usr/bin/env python3
import os
import argparse
import logging
import sys

from docstore import config
from docstore.orchestrator import export_store

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler("docstore.log")
    ]
)
logger = logging.getLogger(__name__)


def main():
    """
    Main entry point for the document store export.
    """
    # Parse command line arguments
    parser = argparse.ArgumentParser(
        description="Document Store: load a content directory and resolve related documents"
    )

    parser.add_argument(
        "-i", "--input",
        default=config.CONTENT_DIR,
        help="Path to the content directory (default: DOCSTORE_CONTENT_DIR)"
    )

    parser.add_argument(
        "-o", "--output",
        help="Path to save the output JSON file. If not provided, will use the directory name with _documents.json."
    )

    parser.add_argument(
        "-s", "--separator",
        help="Literal separator token, or 'auto' to discover it (default: DOCSTORE_SEPARATOR)"
    )

    args = parser.parse_args()

    input_path = os.path.abspath(args.input)

    # Determine output path
    if args.output:
        output_path = os.path.abspath(args.output)
    else:
        input_name = os.path.basename(os.path.normpath(input_path))
        output_path = os.path.join(config.OUTPUT_DIR, f"{input_name}_documents.json")

    # Create output directory if it doesn't exist
    os.makedirs(os.path.dirname(output_path), exist_ok=True)

    logger.info(f"Loading content from {input_path}")
    logger.info(f"Output will be saved to {output_path}")

    try:
        export_store(input_path, output_path, separator=args.separator)
        logger.info(f"Export complete. Results saved to {output_path}")
    except Exception as e:
        # A partial document set is never served
        logger.error(f"Error loading content: {str(e)}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
