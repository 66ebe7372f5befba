import json
import random

from mazewalls.dataset import generate_dataset
from mazewalls.generator import generate
from mazewalls.graph import encode_walls


def _read(path):
    with open(path) as f:
        return [json.loads(line) for line in f]


def test_generate_dataset_records(tmp_path):
    out = tmp_path / "info_labels.jsonl"
    png_dir = tmp_path / "pngs"
    made, uniq = generate_dataset(4, 4, 5, str(out), base_seed=100, png_dir=str(png_dir))
    assert made == 4 and uniq == 4

    recs = _read(out)
    assert [r["index"] for r in recs] == [0, 1, 2, 3]
    assert len({r["signature"] for r in recs}) == 4
    for r in recs:
        assert (r["rows"], r["cols"]) == (4, 5)
        assert r["true_path"][0] == r["start_pos"]
        assert r["true_path"][-1] == r["end_pos"]
        assert r["start_pos"] != r["end_pos"]
        walls = generate(4, 5, random.Random(r["seed"]))
        assert [list(row) for row in walls.verticals] == r["verticals"]
        assert [list(row) for row in walls.horizontals] == r["horizontals"]
        assert encode_walls(walls) == r["signature"]
        assert (png_dir / f"maze_{r['index']:05d}.png").exists()


def test_generate_dataset_is_reproducible(tmp_path):
    a, b = tmp_path / "a.jsonl", tmp_path / "b.jsonl"
    generate_dataset(3, 6, 6, str(a), base_seed=7)
    generate_dataset(3, 6, 6, str(b), base_seed=7)
    assert a.read_text() == b.read_text()


def test_generate_dataset_stops_when_layouts_run_out(tmp_path):
    # a 1x2 grid has exactly one perfect maze
    out = tmp_path / "tiny.jsonl"
    made, uniq = generate_dataset(3, 1, 2, str(out), max_attempts=10)
    assert (made, uniq) == (1, 1)
    assert len(_read(out)) == 1
