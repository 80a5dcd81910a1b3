import os

import cv2

import main
from helpers import split_image
from visualization.save_outputs import save_all_outputs
from visualization.surface import ImageSurface


def test_sweep_saves_one_sketch_per_sensitivity(tmp_path, capsys):
    source = tmp_path / "split.png"
    out = tmp_path / "out"
    cv2.imwrite(str(source), split_image())

    main.main([str(source), "--sensitivity", "30", "--sweep", "60", "10",
               "--size", "90", "--output", str(out)])

    assert sorted(os.listdir(out)) == ["split_s10.png", "split_s30.png", "split_s60.png"]
    sketch = cv2.imread(str(out / "split_s30.png"))
    assert sketch.shape == (90, 90, 3)
    assert "[OK] Finished split" in capsys.readouterr().out


def test_undecodable_file_is_reported_and_skipped(tmp_path, capsys):
    bad = tmp_path / "broken.png"
    bad.write_bytes(b"not an image")
    out = tmp_path / "out"

    main.main([str(bad), "--output", str(out)])

    assert os.listdir(out) == []
    assert "[ERROR] Could not decode" in capsys.readouterr().out


def test_save_all_outputs_writes_only_the_sketch(tmp_path):
    surface = ImageSurface(30, 30)

    path = save_all_outputs(str(tmp_path / "out"), "cat", 42, surface)

    assert path == f"{tmp_path / 'out'}/cat_s42.png"
    assert os.listdir(tmp_path / "out") == ["cat_s42.png"]
