from __future__ import annotations


def test_sanity_import() -> None:
    import geom3d
    import numpy as np

    assert isinstance(geom3d.__version__, str)
    assert geom3d.Vector3D.from_array(np.ones(3)) == geom3d.Vector3D.ones()


def test_main_prints_version(capsys) -> None:
    from geom3d.__main__ import main

    assert main() == 0
    out = capsys.readouterr().out
    assert "geom3d v" in out
    assert "Point3D" in out and "Vector3D" in out
