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


"""File I/O utilities for loading YAML scenes and exporting JSON samples."""

import json
import logging
import numbers
from datetime import datetime
from itertools import combinations
from pathlib import Path

import yaml

from .relations import intersection_point_of
from .scene_object import SceneObject

logger = logging.getLogger(__name__)


def load_scene(yaml_path):
    """
    Load a scene description from a YAML file.

    Parameters
    ----------
    yaml_path : str
        Path to the YAML scene file.

    Returns
    -------
    tuple
        A tuple containing the following elements:
        - objects : list
            List of SceneObject objects.
        - sampling : dict
            Dictionary with 'precision' and, optionally, 'max_points'.

    Raises
    ------
    FileNotFoundError
        If the YAML file does not exist.
    ValueError
        If the YAML structure is invalid.

    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Scene file not found: {yaml_path}")

    with open(yaml_path, 'r') as f:
        config = yaml.safe_load(f)

    if not isinstance(config, dict):
        raise ValueError("Scene file must contain a mapping")

    required_keys = ['sampling', 'objects']
    for key in required_keys:
        if key not in config:
            raise ValueError(f"Missing required key in YAML: '{key}'")

    sampling = config['sampling']
    if not isinstance(sampling, dict) or 'precision' not in sampling:
        raise ValueError("Missing required sampling parameter: 'precision'")
    precision = sampling['precision']
    if isinstance(precision, bool) or not isinstance(precision, numbers.Real) or not precision > 0:
        raise ValueError(f"precision must be a positive number, got {precision!r}")

    max_points = sampling.get('max_points')
    if max_points is not None:
        if isinstance(max_points, bool) or not isinstance(max_points, int) or max_points < 1:
            raise ValueError(f"max_points must be a positive integer, got {max_points!r}")

    if not config['objects']:
        raise ValueError("No objects defined in scene")
    if not isinstance(config['objects'], list):
        raise ValueError("'objects' must be a list")

    objects = []
    names = set()
    for i, object_dict in enumerate(config['objects']):
        if not isinstance(object_dict, dict):
            raise ValueError(f"Object {i} must be a mapping, got {type(object_dict).__name__}")
        name = object_dict.get('name', f'object_{i}')
        if not isinstance(name, str):
            raise ValueError(f"Object {i} name must be a string, got {name!r}")
        if name in names:
            raise ValueError(f"Duplicate object name: '{name}'")
        names.add(name)

        try:
            objects.append(SceneObject(name, object_dict))
        except ArithmeticError as e:
            raise ValueError(f"Object '{name}' is degenerate: {e}") from e

    if max_points is None and not all(obj.is_bounded for obj in objects):
        raise ValueError("Sampling parameter 'max_points' is required for lines and half-lines")

    logger.debug("Loaded %d object(s) from %s", len(objects), yaml_path)
    return objects, sampling


def sample_scene_objects(objects, sampling):
    """Sample every object in place using the scene sampling parameters."""
    precision = sampling['precision']
    max_points = sampling.get('max_points')

    for obj in objects:
        limit = max_points
        if limit is None:
            # Bounded objects stop on their own.
            limit = int(obj.geometry.length // precision) + 2
        obj.generate_samples(precision, limit)
        logger.debug("Sampled %d point(s) from %r", len(obj.samples), obj)


def pairwise_intersections(objects):
    """
    Solve intersection points of every pair of same-dimension objects.

    Returns
    -------
    list
        One dictionary per pair with 'first', 'second' and 'point'
        (coordinates, or None when the objects do not intersect)

    """
    results = []
    for first, second in combinations(objects, 2):
        if first.geometry.dimension != second.geometry.dimension:
            logger.debug("Skipping %s / %s: dimensions differ", first.name, second.name)
            continue
        point = intersection_point_of(first.geometry, second.geometry)
        results.append({
            'first': first.name,
            'second': second.name,
            'point': point.tolist() if point is not None else None,
        })
    return results


def export_to_json(objects, intersections, output_path, metadata=None):
    """
    Export sampled objects and intersections to a JSON file.

    Parameters
    ----------
    objects : list
        List of SceneObject objects. Samples must be generated before export.
    intersections : list
        Output of ``pairwise_intersections``.
    output_path : str
        Path where the JSON file will be written.
    metadata : dict, optional
        Optional metadata to include in the output file.

    Raises
    ------
    RuntimeError
        If any object has not been sampled yet.

    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    for obj in objects:
        if not obj.is_sampled:
            raise RuntimeError(f"Object '{obj.name}' has not been sampled yet - cannot export")

    data = {
        'metadata': {
            'generated_at': datetime.now().isoformat(),
            'num_objects': len(objects),
            'total_samples': sum(len(obj.samples) for obj in objects)
        },
        'objects': {},
        'intersections': intersections,
    }

    if metadata:
        data['metadata'].update(metadata)

    for obj in objects:
        data['objects'][obj.name] = obj.to_dict()

    with open(output_path, 'w') as f:
        json.dump(data, f, indent=2)

    logger.info("Exported %d object(s) to %s", len(objects), output_path)


def auto_generate_output_path(input_path, output_dir=None):
    """
    Generate a timestamped output path for a scene file.

    The file is written to ``output_dir`` when given, otherwise to a
    ``generated`` directory next to the input file.
    """
    input_path = Path(input_path)
    scene_name = input_path.stem
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    if output_dir is None:
        output_dir = input_path.parent / "generated"
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    output_filename = f"{scene_name}_{timestamp}.json"
    return output_dir / output_filename
