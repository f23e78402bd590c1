# -*- coding: utf-8 -*-
"""
Command-line Tests - End-to-end runs of the ``ijstretch`` console script.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

import numpy as np
import pytest

try:
    from PIL import Image
    _HAS_PIL = True
except ImportError:
    _HAS_PIL = False

from ijstretch.cli import main, parse_args

pytestmark = pytest.mark.skipif(
    not _HAS_PIL, reason="Pillow not installed"
)


def _write(path, data):
    Image.fromarray(data).save(str(path))


def _read(path):
    with Image.open(str(path)) as img:
        return np.array(img)


class TestMain:

    def test_min_max_stretch(self, tmp_path, capsys):
        src = tmp_path / "in.png"
        dst = tmp_path / "out.png"
        _write(src, np.arange(50, 201, dtype=np.uint8).reshape(1, -1))

        assert main([str(src), str(dst)]) == 0

        result = _read(dst)
        assert result[0, 0] == 0
        assert result[0, 75] == 127
        assert result[0, 150] == 255
        assert "(50, 200) -> (0, 255)" in capsys.readouterr().out

    def test_saturation(self, tmp_path):
        src = tmp_path / "in.png"
        dst = tmp_path / "out.png"
        _write(src, np.arange(256, dtype=np.uint8).reshape(16, 16))

        assert main([str(src), str(dst), "--saturation", "10"]) == 0

        flat = _read(dst).ravel()
        assert np.all(flat[:25] == 0)
        assert np.all(flat[232:] == 255)

    def test_explicit_bounds(self, tmp_path):
        src = tmp_path / "in.png"
        dst = tmp_path / "out.png"
        _write(src, np.arange(256, dtype=np.uint8).reshape(16, 16))

        assert main([str(src), str(dst), "--min", "10", "--max", "245"]) == 0

        result = _read(dst)
        assert result.min() == 10
        assert result.max() == 245

    def test_monochrome_refused(self, tmp_path, capsys):
        src = tmp_path / "in.png"
        dst = tmp_path / "out.png"
        _write(src, np.full((8, 8), 77, dtype=np.uint8))

        assert main([str(src), str(dst)]) == 1

        assert not dst.exists()
        assert "monochrome" in capsys.readouterr().err

    def test_invalid_saturation_fails(self, tmp_path, capsys):
        src = tmp_path / "in.png"
        dst = tmp_path / "out.png"
        _write(src, np.arange(50, 201, dtype=np.uint8).reshape(1, -1))

        assert main([str(src), str(dst), "--saturation", "60"]) == 1

        assert not dst.exists()
        assert "[0, 50)" in capsys.readouterr().err

    def test_rgb_input_fails(self, tmp_path, capsys):
        src = tmp_path / "rgb.png"
        dst = tmp_path / "out.png"
        _write(src, np.zeros((4, 4, 3), dtype=np.uint8))

        assert main([str(src), str(dst)]) == 1

        assert not dst.exists()
        assert "grayscale" in capsys.readouterr().err

    def test_missing_input_fails(self, tmp_path, capsys):
        dst = tmp_path / "out.png"

        assert main([str(tmp_path / "nope.png"), str(dst)]) == 1

        assert not dst.exists()
        assert "nope.png" in capsys.readouterr().err

    def test_unwritable_output_fails(self, tmp_path, capsys):
        src = tmp_path / "in.png"
        _write(src, np.arange(256, dtype=np.uint8).reshape(16, 16))

        dst = tmp_path / "missing_dir" / "out.png"
        assert main([str(src), str(dst)]) == 1
        assert "Cannot write output" in capsys.readouterr().err

    def test_invalid_bounds_refused(self, tmp_path, capsys):
        src = tmp_path / "in.png"
        dst = tmp_path / "out.png"
        _write(src, np.arange(256, dtype=np.uint8).reshape(16, 16))

        assert main([str(src), str(dst), "--min", "200", "--max", "100"]) == 1
        assert not dst.exists()
        assert "[0, 255]" in capsys.readouterr().err

    def test_only_min_given_uses_default_max(self, tmp_path):
        src = tmp_path / "in.png"
        dst = tmp_path / "out.png"
        _write(src, np.arange(256, dtype=np.uint8).reshape(16, 16))

        assert main([str(src), str(dst), "--min", "100"]) == 0

        result = _read(dst)
        assert result.min() == 100
        assert result.max() == 255


class TestParseArgs:

    def test_defaults(self):
        args = parse_args(["a.png", "b.png"])
        assert args.saturation is None
        assert args.new_min is None
        assert args.new_max is None
        assert not args.verbose

    def test_saturation_and_bounds_exclusive(self):
        with pytest.raises(SystemExit):
            parse_args(["a.png", "b.png", "--saturation", "1", "--min", "5"])
