import json
from pathlib import Path

import pytest
import yaml

from line_geometry import HalfLine, Line, Point2D, Segment, Vector2D
from line_geometry import scene_io
from line_geometry.sample_scene import main
from line_geometry.scene_object import SceneObject, build_geometry

EXAMPLE_SCENE = Path(__file__).parent.parent / "config" / "example_scene.yaml"


def write_scene(tmp_path, config, name="scene.yaml"):
    path = tmp_path / name
    path.write_text(yaml.safe_dump(config))
    return path


def test_build_geometry():
    assert build_geometry({'type': 'line', 'point': [0, 0], 'direction': [1, 0]}) == \
        Line(Point2D.ORIGIN, Vector2D.I)
    assert isinstance(
        build_geometry({'type': 'half_line', 'point': [0, 0, 0], 'direction': [0, 0, 1]}),
        HalfLine,
    )
    segment = build_geometry({'type': 'segment', 'start': [0, 0], 'end': [3, 4]})
    assert isinstance(segment, Segment)
    assert segment.length == pytest.approx(5.0)


@pytest.mark.parametrize("object_dict", [
    {'type': 'circle', 'point': [0, 0]},
    {'type': 'segment', 'start': [0, 0]},
    {'type': 'line', 'point': [0, 0, 0, 0], 'direction': [1, 0, 0, 0]},
])
def test_build_geometry_invalid(object_dict):
    with pytest.raises(ValueError):
        build_geometry(object_dict)


def test_scene_object_export_requires_samples():
    obj = SceneObject('s', {'type': 'segment', 'start': [0, 0], 'end': [1, 0]})
    with pytest.raises(RuntimeError):
        obj.to_dict()
    obj.generate_samples(0.5, 10)
    data = obj.to_dict()
    assert data['type'] == 'segment'
    assert data['num_samples'] == 3
    assert data['samples'][-1] == [1.0, 0.0]


def test_load_example_scene():
    objects, sampling = scene_io.load_scene(EXAMPLE_SCENE)
    assert [obj.name for obj in objects] == [
        'x_axis', 'diagonal_ray', 'vertical_segment', 'beam', 'post'
    ]
    assert sampling['precision'] == 0.5
    assert sampling['max_points'] == 21


def test_load_scene_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        scene_io.load_scene(tmp_path / "missing.yaml")


@pytest.mark.parametrize("config", [
    {'objects': [{'type': 'segment', 'start': [0, 0], 'end': [1, 0]}]},
    {'sampling': {}, 'objects': [{'type': 'segment', 'start': [0, 0], 'end': [1, 0]}]},
    {'sampling': {'precision': -1}, 'objects': [{'type': 'segment', 'start': [0, 0], 'end': [1, 0]}]},
    {'sampling': {'precision': 1}, 'objects': []},
    {'sampling': {'precision': 1}, 'objects': [{'type': 'line', 'point': [0, 0], 'direction': [1, 0]}]},
    {'sampling': {'precision': 1}, 'objects': [{'type': 'segment', 'start': [1, 1], 'end': [1, 1]}]},
    {'sampling': {'precision': 1, 'max_points': 5}, 'objects': [
        {'name': 'a', 'type': 'segment', 'start': [0, 0], 'end': [1, 0]},
        {'name': 'a', 'type': 'segment', 'start': [0, 1], 'end': [1, 1]},
    ]},
    {'sampling': {'precision': 'abc'}, 'objects': [{'type': 'segment', 'start': [0, 0], 'end': [1, 0]}]},
    {'sampling': {'precision': True}, 'objects': [{'type': 'segment', 'start': [0, 0], 'end': [1, 0]}]},
    {'sampling': {'precision': 1, 'max_points': 2.5}, 'objects': [
        {'type': 'line', 'point': [0, 0], 'direction': [1, 0]},
    ]},
    {'sampling': {'precision': 1, 'max_points': 0}, 'objects': [
        {'type': 'line', 'point': [0, 0], 'direction': [1, 0]},
    ]},
    {'sampling': {'precision': 1, 'max_points': None}, 'objects': [
        {'type': 'line', 'point': [0, 0], 'direction': [1, 0]},
    ]},
    {'sampling': {'precision': 1}, 'objects': ['oops']},
    {'sampling': {'precision': 1}, 'objects': {'a': {'type': 'segment'}}},
    {'sampling': {'precision': 1}, 'objects': [{'type': 'segment', 'start': 3, 'end': [1, 0]}]},
    {'sampling': {'precision': 1}, 'objects': [
        {'name': ['a'], 'type': 'segment', 'start': [0, 0], 'end': [1, 0]},
    ]},
])
def test_load_scene_invalid(tmp_path, config):
    with pytest.raises(ValueError):
        scene_io.load_scene(write_scene(tmp_path, config))


def test_bounded_scene_without_max_points(tmp_path):
    config = {
        'sampling': {'precision': 1.0},
        'objects': [{'type': 'segment', 'start': [0, 0], 'end': [10, 0]}],
    }
    objects, sampling = scene_io.load_scene(write_scene(tmp_path, config))
    scene_io.sample_scene_objects(objects, sampling)
    assert len(objects[0].samples) == 11
    assert objects[0].name == 'object_0'


def test_sample_and_intersect_example_scene():
    objects, sampling = scene_io.load_scene(EXAMPLE_SCENE)
    scene_io.sample_scene_objects(objects, sampling)
    counts = {obj.name: len(obj.samples) for obj in objects}
    assert counts == {
        'x_axis': 21, 'diagonal_ray': 21, 'vertical_segment': 11, 'beam': 21, 'post': 11
    }

    intersections = {
        (item['first'], item['second']): item['point']
        for item in scene_io.pairwise_intersections(objects)
    }
    assert len(intersections) == 4
    assert intersections[('x_axis', 'diagonal_ray')] == pytest.approx([0.0, 0.0], abs=1e-9)
    assert intersections[('x_axis', 'vertical_segment')] == pytest.approx([3.0, 0.0])
    assert intersections[('diagonal_ray', 'vertical_segment')] == pytest.approx([3.0, 3.0])
    assert intersections[('beam', 'post')] == pytest.approx([5.0, 0.0, 0.0])


def test_export_to_json(tmp_path):
    objects, sampling = scene_io.load_scene(EXAMPLE_SCENE)
    with pytest.raises(RuntimeError):
        scene_io.export_to_json(objects, [], tmp_path / "out.json")

    scene_io.sample_scene_objects(objects, sampling)
    intersections = scene_io.pairwise_intersections(objects)
    output = tmp_path / "nested" / "out.json"
    scene_io.export_to_json(objects, intersections, output, {'source': 'test'})

    data = json.loads(output.read_text())
    assert data['metadata']['num_objects'] == 5
    assert data['metadata']['total_samples'] == 85
    assert data['metadata']['source'] == 'test'
    assert data['objects']['x_axis']['boundaries'] == [None, None]
    assert data['objects']['diagonal_ray']['boundaries'] == [0.0, None]
    assert len(data['intersections']) == 4


def test_auto_generate_output_path(tmp_path):
    path = scene_io.auto_generate_output_path(tmp_path / "my_scene.yaml")
    assert path.parent == tmp_path / "generated"
    assert path.parent.is_dir()
    assert path.name.startswith("my_scene_")
    assert path.suffix == ".json"


def test_cli_writes_output(tmp_path):
    output = tmp_path / "samples.json"
    assert main(['--input', str(EXAMPLE_SCENE), '--output', str(output), '--verbose']) == 0
    data = json.loads(output.read_text())
    assert set(data['objects']) == {'x_axis', 'diagonal_ray', 'vertical_segment', 'beam', 'post'}


def test_cli_reports_errors(tmp_path):
    assert main(['--input', str(tmp_path / "missing.yaml")]) == 1
    bad = write_scene(tmp_path, {'objects': []})
    assert main(['--input', str(bad), '--output', str(tmp_path / "out.json")]) == 1


@pytest.mark.parametrize("config", [
    {'sampling': {'precision': 'abc'}, 'objects': [{'type': 'segment', 'start': [0, 0], 'end': [1, 0]}]},
    {'sampling': {'precision': 1}, 'objects': ['oops']},
    {'sampling': {'precision': 1, 'max_points': 'many'}, 'objects': [
        {'type': 'line', 'point': [0, 0], 'direction': [1, 0]},
    ]},
])
def test_cli_reports_malformed_values(tmp_path, config):
    bad = write_scene(tmp_path, config)
    assert main(['--input', str(bad), '--output', str(tmp_path / "out.json")]) == 1
    assert not (tmp_path / "out.json").exists()
