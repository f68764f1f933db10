from __future__ import annotations

from maze_core.rle import tex2png
from maze_core.rle.catalog import describe_resource, is_plain_bitmap
from maze_core.rle.palette import PIXEL_DATA_OFFSET


def _write_texture(path, stream, dim: int = 2) -> None:
    data = bytearray(PIXEL_DATA_OFFSET)
    data[4:6] = dim.to_bytes(2, "little")
    data.extend(stream)
    path.write_bytes(bytes(data))


def test_catalog_knows_rle_and_plain_resources() -> None:
    assert describe_resource("/tmp/3D Maze - Copy_105_101.bin") == "rat"
    assert describe_resource("3d maze - copy_100_100.bin") == "brick"
    assert describe_resource("other.bin") is None
    assert is_plain_bitmap("3D Maze - Copy_107_100.bin")
    assert not is_plain_bitmap("3D Maze - Copy_120_101.bin")


def test_main_writes_image_next_to_input(tmp_path) -> None:
    tex_path = tmp_path / "3D Maze - Copy_104_101.bin"
    _write_texture(tex_path, [4, 1, 0, 1])

    code = tex2png.main([str(tex_path), "--config", str(tmp_path / "none.ini")])

    assert code == 0
    assert (tmp_path / "3D Maze - Copy_104_101_image.png").exists()
    assert not (tmp_path / "3D Maze - Copy_104_101_color_table.png").exists()


def test_main_colormap_flag_adds_debug_outputs(tmp_path) -> None:
    tex_path = tmp_path / "pattern.bin"
    _write_texture(tex_path, [4, 1])
    out_dir = tmp_path / "out"

    code = tex2png.main(
        [str(tex_path), "-o", str(out_dir), "--colormap", "--config", str(tmp_path / "none.ini")]
    )

    assert code == 0
    assert sorted(p.name for p in out_dir.iterdir()) == [
        "pattern_color_table.png",
        "pattern_image.png",
        "pattern_image_grayscale.png",
    ]


def test_main_reads_colormap_setting_from_ini(tmp_path) -> None:
    ini_path = tmp_path / "settings.ini"
    ini_path.write_text("[export]\ncolormap_and_index = on\n", encoding="utf-8")
    tex_path = tmp_path / "pattern.bin"
    _write_texture(tex_path, [0, 1])

    assert tex2png.main([str(tex_path), "--config", str(ini_path)]) == 0
    assert (tmp_path / "pattern_image_grayscale.png").exists()


def test_main_reports_failures(tmp_path) -> None:
    bad = tmp_path / "bad.bin"
    _write_texture(bad, [0, 0])
    plain = tmp_path / "3D Maze - Copy_100_100.bin"
    _write_texture(plain, [0, 1])
    good = tmp_path / "good.bin"
    _write_texture(good, [0, 1])

    code = tex2png.main(
        [str(bad), str(plain), str(good), "--config", str(tmp_path / "none.ini")]
    )

    assert code == 1
    assert (tmp_path / "good_image.png").exists()
    assert not (tmp_path / "bad_image.png").exists()
    assert not (tmp_path / "3D Maze - Copy_100_100_image.png").exists()
