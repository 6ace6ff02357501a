import pytest

from catalog.model import ProjectionDefinition
from crs_formats.dispatcher import (
    MISSING_ALIAS,
    FormatKey,
    build_all_artifacts,
    build_artifact,
    parse_format_key,
)
from crs_formats.export import ExportConfig, export_artifacts
from crs_formats.vendor import EsriCompatibility, build_vendor_wkt
from crs_formats.wkt1 import build_wkt1
from crs_formats.wkt2 import build_wkt2_pretty


@pytest.mark.parametrize(
    ("fixture", "level"),
    [
        ("robinson", EsriCompatibility.SUPPORTED),
        ("nicolosi", EsriCompatibility.LIMITED),
        ("aliasless", EsriCompatibility.NONE),
    ],
)
def test_vendor_compatibility(request, fixture: str, level: EsriCompatibility) -> None:
    definition = request.getfixturevalue(fixture)
    vendor = build_vendor_wkt(definition)
    assert vendor.compatibility is level
    assert vendor.content == build_wkt1(definition)
    assert vendor.registered is (level is EsriCompatibility.SUPPORTED)


def test_vendor_messages(robinson, nicolosi) -> None:
    assert "WKID 54030" in build_vendor_wkt(robinson).message
    assert "+proj=nicol" in build_vendor_wkt(nicolosi).message


def test_parse_format_key() -> None:
    assert parse_format_key("wkt2-compact") is FormatKey.WKT2_COMPACT
    assert parse_format_key(FormatKey.PRJ) is FormatKey.PRJ
    with pytest.raises(ValueError, match="Unknown format key"):
        parse_format_key("geojson")


def test_all_artifacts_available_for_nicolosi(nicolosi: ProjectionDefinition) -> None:
    artifacts = build_all_artifacts(nicolosi)
    assert list(artifacts) == list(FormatKey)
    assert all(a.available for a in artifacts.values())
    assert artifacts[FormatKey.PRJ].filename == "nicolosi-globular.prj"
    assert artifacts[FormatKey.WKT2].filename == "nicolosi-globular_wkt2.txt"
    assert artifacts[FormatKey.JSON].media_type == "application/json"
    assert artifacts[FormatKey.PRJ].compatibility is EsriCompatibility.LIMITED
    assert artifacts[FormatKey.WKT1].compatibility is None


def test_missing_alias_is_explicit(aliasless: ProjectionDefinition) -> None:
    artifact = build_artifact(aliasless, "proj")
    assert not artifact.available
    assert artifact.content is None
    assert artifact.reason == MISSING_ALIAS
    assert build_artifact(aliasless, FormatKey.WKT1).available


def test_export_writes_default_artifacts(tmp_path, nicolosi: ProjectionDefinition) -> None:
    out = tmp_path / "exports"
    paths = export_artifacts(nicolosi, ExportConfig(output_dir=out))
    assert sorted(p.name for p in paths) == [
        "nicolosi-globular.json",
        "nicolosi-globular.prj",
        "nicolosi-globular_wkt2.txt",
    ]
    assert (out / "nicolosi-globular.prj").read_text(encoding="utf-8") == build_wkt1(nicolosi)
    assert (out / "nicolosi-globular_wkt2.txt").read_text(encoding="utf-8") == build_wkt2_pretty(nicolosi)


def test_export_skips_unavailable(tmp_path, aliasless: ProjectionDefinition) -> None:
    config = ExportConfig(output_dir=tmp_path, formats=(FormatKey.PRJ, FormatKey.PROJ))
    paths = export_artifacts(aliasless, config)
    assert [p.name for p in paths] == ["cahill-keyes.prj"]
    assert not (tmp_path / "cahill-keyes_proj.txt").exists()


def test_export_without_config_uses_working_directory(
    tmp_path, monkeypatch, robinson: ProjectionDefinition
) -> None:
    monkeypatch.chdir(tmp_path)
    paths = export_artifacts(robinson)
    assert len(paths) == 3
    assert (tmp_path / "robinson.prj").read_text(encoding="utf-8") == build_wkt1(robinson)
