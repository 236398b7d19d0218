#!/usr/bin/env python3

# Copyright 2025 Berkan Tali
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Command line entry point - loads a scene, samples it and exports JSON."""

import argparse
import logging
import sys
from pathlib import Path

from line_geometry import scene_io

logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Sample lines, half-lines and segments from a YAML scene",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Sample a scene, output next to it in generated/
  %(prog)s --input scene.yaml

  # Specify both input and output
  %(prog)s --input scene.yaml --output samples.json

  # Verbose output
  %(prog)s --input scene.yaml --verbose
        """
    )

    default_config = Path(__file__).parent.parent / "config" / "example_scene.yaml"

    parser.add_argument(
        '--input', '-i',
        type=str,
        default=str(default_config) if default_config.exists() else None,
        help='Input YAML scene file (default: config/example_scene.yaml)'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        default=None,
        help='Output JSON file (default: auto-generated in generated/ next to the input)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log detailed information during sampling'
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Orchestrate loading, sampling and exporting of a scene."""
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.input is None:
        logger.error("No input file specified and default scene not found")
        logger.error("Use --input to specify a YAML scene file")
        return 1

    try:
        logger.debug("Loading scene from: %s", args.input)
        objects, sampling = scene_io.load_scene(args.input)

        logger.debug("  Scene: %s", Path(args.input).stem)
        logger.debug("  Number of objects: %d", len(objects))
        logger.debug("  Precision: %s", sampling['precision'])
        logger.debug("  Max points: %s", sampling.get('max_points'))

        scene_io.sample_scene_objects(objects, sampling)
        intersections = scene_io.pairwise_intersections(objects)

        found = sum(1 for item in intersections if item['point'] is not None)
        logger.info("Sampled %d object(s), %d intersection(s) found", len(objects), found)

        if args.output is None:
            output_path = scene_io.auto_generate_output_path(args.input)
            logger.debug("Auto-generated output path: %s", output_path)
        else:
            output_path = Path(args.output)

        metadata = {
            'input_file': str(Path(args.input).resolve()),
            'precision': sampling['precision'],
            'max_points': sampling.get('max_points'),
        }

        scene_io.export_to_json(objects, intersections, output_path, metadata)
        return 0

    except FileNotFoundError as e:
        logger.error("%s", e)
        return 1
    except ValueError as e:
        logger.error("Invalid scene - %s", e)
        return 1


if __name__ == '__main__':
    sys.exit(main())
