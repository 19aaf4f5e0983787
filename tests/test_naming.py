from pathlib import Path
import sys

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from midisplit.naming import (  # noqa: E402
    default_naming,
    resolve_output_path,
    sanitize_filename,
)


def test_sanitize_replaces_colon_and_star() -> None:
    assert sanitize_filename("Lead: Synth*2") == "Lead_ Synth_2"


@pytest.mark.parametrize(
    "name, expected",
    [
        ('a<b>c:d"e/f\\g|h?i*j', "a_b_c_d_e_f_g_h_i_j"),
        ("Grand Piano", "Grand Piano"),
        ("Flûte à bec", "Flûte à bec"),
        ("鼓 (drums)", "鼓 (drums)"),
        ("", ""),
    ],
)
def test_sanitize(name: str, expected: str) -> None:
    assert sanitize_filename(name) == expected


def test_first_candidate(tmp_path: Path) -> None:
    path = resolve_output_path("song", "Piano", tmp_path)
    assert path == tmp_path / "song - Piano.mid"


def test_collisions_increment_counter(tmp_path: Path) -> None:
    (tmp_path / "song - Piano.mid").write_bytes(b"")
    (tmp_path / "song - Piano (Copy 1).mid").write_bytes(b"")
    path = resolve_output_path("song", "Piano", tmp_path)
    assert path == tmp_path / "song - Piano (Copy 2).mid"


def test_default_naming_sanitizes(tmp_path: Path) -> None:
    path = default_naming("song", "Bass/Low", 4, tmp_path)
    assert path.name == "song - Bass_Low.mid"
    assert path.parent == tmp_path
