import pytest

from settings import BuildConfig


def test_defaults_resolve_against_root(tmp_path):
    cfg = BuildConfig(root=str(tmp_path))
    assert cfg.data_path == tmp_path / "data" / "products.json"
    assert cfg.template_path == tmp_path / "templates" / "material.html"
    assert cfg.output_dir == tmp_path / "materials"
    assert cfg.site_defaults.phone == "02-487-9775"
    assert cfg.ingest_site.hours.startswith("평일")
    assert cfg.placeholder_policy == "passthrough"
    assert cfg.invalid_id_policy == "abort"


def test_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("CATALOG_OUTPUT_DIR", "public/materials")
    monkeypatch.setenv("CATALOG_DEFAULT_PHONE", "010-1234-5678")
    monkeypatch.setenv("CATALOG_INVALID_ID_POLICY", "skip")
    cfg = BuildConfig.from_env(root=str(tmp_path))
    assert cfg.output_dir == tmp_path / "public" / "materials"
    assert cfg.site_defaults.phone == "010-1234-5678"
    assert cfg.invalid_id_policy == "skip"


def test_from_config_file(tmp_path):
    conf = tmp_path / "catalog.conf"
    conf.write_text(
        "# build settings\n"
        "data_path = input/catalog.json\n"
        "placeholder_policy = strict\n"
        "default_category = 미분류\n"
        "default_copyright = (c) Example\n",
        encoding="utf-8",
    )
    cfg = BuildConfig.from_config_file(str(conf), root=str(tmp_path))
    assert cfg.data_path == tmp_path / "input" / "catalog.json"
    assert cfg.placeholder_policy == "strict"
    assert cfg.default_category == "미분류"
    assert cfg.site_defaults.copyright == "(c) Example"


def test_invalid_policies_rejected(tmp_path):
    with pytest.raises(ValueError):
        BuildConfig(root=str(tmp_path), placeholder_policy="loose")
    with pytest.raises(ValueError):
        BuildConfig(root=str(tmp_path), invalid_id_policy="ignore")
