import json

import pytest

from originmod import config_store
from originmod.adapters.config_file import FileConfigStorage
from originmod.core.config_model import RppOverride
from originmod.core.store import ConfigNotInitializedError, ConfigStore


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    path = tmp_path / "originmod" / "config.json"
    monkeypatch.setattr(config_store, "_store", ConfigStore(FileConfigStorage(path.parent, path)))
    return path


def test_accessors_before_init_raise(config_path):
    with pytest.raises(ConfigNotInitializedError):
        config_store.get_config()
    with pytest.raises(ConfigNotInitializedError):
        config_store.is_no_hurt_cam_enabled()
    with pytest.raises(ConfigNotInitializedError):
        config_store.get_custom_rpp()


def test_fresh_install_defaults(config_path):
    config_store.init_config()

    assert config_store.is_no_hurt_cam_enabled() is True
    assert config_store.is_no_fog_enabled() is False
    assert config_store.is_particles_disabler_enabled() is False
    assert config_store.is_java_clouds_enabled() is False
    assert config_store.is_java_cubemap_enabled() is False
    assert config_store.is_classic_skins_enabled() is False
    assert config_store.get_custom_rpp() == ()
    assert json.loads(config_path.read_text(encoding="utf-8"))["Nohurtcam"] is True


def test_accessors_project_loaded_file(config_path):
    config_path.parent.mkdir(parents=True)
    config_path.write_text(
        json.dumps(
            {
                "Nohurtcam": False,
                "Nofog": True,
                "particles_disabler": True,
                "java_clouds": True,
                "java_cubemap": True,
                "classic_skins": True,
                "custom_rpp": [
                    {"apk": "textures/environment/sun.png", "rp": "java/sun.png"},
                    {"apk": "textures/environment/sun.png", "rp": "other/sun.png"},
                ],
            }
        ),
        encoding="utf-8",
    )

    config_store.init_config()

    assert config_store.is_no_hurt_cam_enabled() is False
    assert config_store.is_no_fog_enabled() is True
    assert config_store.is_particles_disabler_enabled() is True
    assert config_store.is_java_clouds_enabled() is True
    assert config_store.is_java_cubemap_enabled() is True
    assert config_store.is_classic_skins_enabled() is True
    assert config_store.get_custom_rpp()[0] == RppOverride(
        apk="textures/environment/sun.png", rp="java/sun.png"
    )
    assert config_store.find_rpp_override("textures/environment/sun.png") == "java/sun.png"
    assert config_store.find_rpp_override("textures/missing.png") is None


def test_package_exposes_init_and_get(config_path):
    import originmod

    assert originmod.init_config() is originmod.get_config()
