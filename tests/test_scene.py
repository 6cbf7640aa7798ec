import pytest

from cubraycaster import errors
from cubraycaster.errors import MapError, ParseError
from cubraycaster.scene import (
    Scene,
    SceneConfig,
    ensure_config_ready,
    load_scene,
    parse_config,
    parse_int_strict,
    parse_rgb,
    parse_scene,
    parse_texture_path,
)

MAP = ["11111", "10001", "10N01", "10001", "11111"]


@pytest.fixture
def textures(tmp_path):
    paths = {}
    for name in ("north", "south", "west", "east"):
        path = tmp_path / f"{name}.png"
        path.write_bytes(b"")
        paths[name] = str(path)
    return paths


def _header(paths):
    return (
        f"NO {paths['north']}\n"
        f"SO {paths['south']}\n"
        f"WE {paths['west']}\n"
        f"EA {paths['east']}\n"
        "\n"
        "F 220,100,0\n"
        "C 225,30,0\n"
        "\n"
    )


def _scene_text(paths, rows=MAP, trailer=""):
    return _header(paths) + "".join(row + "\n" for row in rows) + trailer


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("  +7", 7), ("-0", 0), ("+", 0), ("", 0), ("\t255", 255)],
)
def test_parse_int_strict_valid(text, expected):
    assert parse_int_strict(text) == expected


@pytest.mark.parametrize("text", ["12a", "1 ", "99999999999", "--1", "x"])
def test_parse_int_strict_invalid(text):
    with pytest.raises(ValueError):
        parse_int_strict(text)


def test_parse_rgb_valid():
    assert parse_rgb("220,100,0") == (220, 100, 0)
    assert parse_rgb("1, 2, 3") == (1, 2, 3)


def test_parse_rgb_ignores_empty_fields():
    assert parse_rgb("1,,2,3") == (1, 2, 3)


@pytest.mark.parametrize("text", ["256,0,0", "-1,0,0", "1,2", "1,2,3,4", "1 ,2,3", "a,b,c", ""])
def test_parse_rgb_invalid(text):
    with pytest.raises(ParseError) as excinfo:
        parse_rgb(text)
    assert excinfo.value.message == errors.ERROR_INVALID_RGB


def test_parse_texture_path_trims():
    assert parse_texture_path("   ./textures/wall.png \r\n") == "./textures/wall.png"


@pytest.mark.parametrize("rest", ["./a.png", "\t./a.png", "\n", ""])
def test_parse_texture_path_missing(rest):
    with pytest.raises(ParseError) as excinfo:
        parse_texture_path(rest)
    assert excinfo.value.message == errors.ERROR_MISSING_TEXTURE_PATH


def test_parse_texture_path_empty():
    with pytest.raises(ParseError) as excinfo:
        parse_texture_path("   \n")
    assert excinfo.value.message == errors.ERROR_TEXTURE_PATH_EMPTY


def test_parse_config_reads_all_elements(textures):
    lines = _scene_text(textures).splitlines(keepends=True)
    config = parse_config(lines)
    assert config.north == textures["north"]
    assert config.south == textures["south"]
    assert config.west == textures["west"]
    assert config.east == textures["east"]
    assert config.floor == (220, 100, 0)
    assert config.ceiling == (225, 30, 0)


def test_parse_config_empty_input():
    with pytest.raises(ParseError) as excinfo:
        parse_config([])
    assert excinfo.value.message == errors.ERROR_EMPTY_FILE


@pytest.mark.parametrize(
    "lines, message",
    [
        (["NO ./a.png\n", "NO ./b.png\n"], errors.ERROR_DUPLICATE_TEXTURE),
        (["F 1,2,3\n", "F 1,2,3\n"], errors.ERROR_DUPLICATE_COLOR),
        (["F1,2,3\n"], errors.ERROR_MISSING_COLOR_VALUE),
        (["X ./a.png\n"], errors.ERROR_UNKNOWN_IDENTIFIER),
        (["  0111\n"], errors.ERROR_UNKNOWN_IDENTIFIER),
        (["C 300,0,0\n"], errors.ERROR_INVALID_RGB),
    ],
)
def test_parse_config_errors(lines, message):
    with pytest.raises(ParseError) as excinfo:
        parse_config(lines)
    assert excinfo.value.message == message


def test_ensure_config_ready_missing_element(textures):
    config = SceneConfig(north=textures["north"], south=textures["south"],
                         west=textures["west"], east=textures["east"], floor=(1, 2, 3))
    with pytest.raises(ParseError) as excinfo:
        ensure_config_ready(config)
    assert excinfo.value.message == errors.ERROR_MISSING_CONFIG


def test_ensure_config_ready_not_png(textures):
    config = SceneConfig(north=textures["north"], south=textures["south"],
                         west=textures["west"], east="./east.jpg",
                         floor=(1, 2, 3), ceiling=(4, 5, 6))
    with pytest.raises(ParseError) as excinfo:
        ensure_config_ready(config)
    assert excinfo.value.message == errors.ERROR_TEXTURE_NOT_PNG


def test_ensure_config_ready_missing_file(textures, tmp_path):
    missing = str(tmp_path / "missing.png")
    config = SceneConfig(north=textures["north"], south=missing,
                         west=textures["west"], east=textures["east"],
                         floor=(1, 2, 3), ceiling=(4, 5, 6))
    with pytest.raises(ParseError) as excinfo:
        ensure_config_ready(config)
    assert excinfo.value.message == errors.ERROR_TEXTURE_NOT_ACCESSIBLE.format(path=missing)


def test_ensure_config_ready_accepts_complete_config(textures):
    config = SceneConfig(north=textures["north"], south=textures["south"],
                         west=textures["west"], east=textures["east"],
                         floor=(1, 2, 3), ceiling=(4, 5, 6))
    ensure_config_ready(config)
    assert config.floor == (1, 2, 3)


def test_parse_scene_full(textures):
    scene = parse_scene(_scene_text(textures))
    assert isinstance(scene, Scene)
    assert scene.grid.rows == tuple(MAP)
    assert scene.grid.player_direction == "N"
    assert scene.config.ceiling == (225, 30, 0)


def test_parse_scene_crlf(textures):
    text = _scene_text(textures).replace("\n", "\r\n")
    scene = parse_scene(text)
    assert all("\r" not in row for row in scene.grid.rows)
    assert scene.config.north == textures["north"]
    assert scene.grid.player_direction == "N"


def test_parse_scene_pads_rows(textures):
    rows = ["  1111", "111001", "1N0001", "111111"]
    scene = parse_scene(_scene_text(textures, rows))
    assert {len(row) for row in scene.grid.rows} == {6}
    assert scene.grid.rows[0] == rows[0]


def test_parse_scene_empty_text():
    with pytest.raises(ParseError) as excinfo:
        parse_scene("")
    assert excinfo.value.message == errors.ERROR_EMPTY_FILE


def test_parse_scene_without_map(textures):
    with pytest.raises(MapError) as excinfo:
        parse_scene(_header(textures))
    assert excinfo.value.message == errors.ERROR_EMPTY_MAP


def test_parse_scene_config_after_map(textures):
    with pytest.raises(MapError) as excinfo:
        parse_scene(_scene_text(textures, trailer="\nF 1,2,3\n"))
    assert excinfo.value.message == errors.ERROR_MAP_NOT_AT_THE_END


def test_parse_scene_checks_textures_before_map(textures, tmp_path):
    textures = dict(textures, west=str(tmp_path / "absent.png"))
    open_map = ["11111", "10001", "10N0 ", "10001", "11111"]
    with pytest.raises(ParseError):
        parse_scene(_scene_text(textures, open_map))


def test_parse_scene_open_map(textures):
    open_map = ["11111", "10001", "10N0 ", "10001", "11111"]
    with pytest.raises(MapError) as excinfo:
        parse_scene(_scene_text(textures, open_map))
    assert excinfo.value.message == errors.ERROR_MAP_NOT_CLOSED


def test_load_scene_round_trip(textures, tmp_path):
    path = tmp_path / "level.cub"
    path.write_text(_scene_text(textures))
    scene = load_scene(path)
    assert scene.grid.rows == tuple(MAP)
    assert scene.config.floor == (220, 100, 0)


def test_load_scene_missing_file(tmp_path):
    with pytest.raises(ParseError) as excinfo:
        load_scene(tmp_path / "nothing.cub")
    assert excinfo.value.message == errors.ERROR_OPEN