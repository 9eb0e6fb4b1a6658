"""Unit tests for the nativeset CLI."""

import json
from pathlib import Path

import pytest

from nativeset import __version__
from nativeset import config
from nativeset import platform as host
from nativeset.cli import main
from nativeset.errors import ExitCode
from nativeset.platform.host import clear_host_cache


@pytest.fixture(autouse=True)
def isolated(monkeypatch):
    """Fix the host to Linux x64 and keep CLI runs from leaking config."""
    for name in ("NATIVESET_PLATFORM", "NATIVESET_LIBRARY_SET", "NATIVESET_PROFILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(host, "HOST_OS_NAME", "Linux")
    monkeypatch.setattr(host, "HOST_ARCH", "x86_64")
    clear_host_cache()
    saved = config.get_config()
    yield
    config.set_config(saved)
    clear_host_cache()


class TestMainCLI:
    """Tests for the top-level parser."""
    
    def test_create_parser(self):
        parser = main.create_parser()
        assert parser.prog == "nativeset"
    
    def test_version_string(self):
        version = main.get_version_string()
        assert __version__ in version
        assert "Linux x86_64" in version
    
    def test_main_no_args_shows_help(self, capsys):
        result = main.main([])
        assert result == 0
        assert "nativeset" in capsys.readouterr().out


class TestDetectCommand:
    """Tests for `nativeset detect`."""
    
    def test_detect_host(self, capsys):
        assert main.main(["detect"]) == ExitCode.SUCCESS
        assert capsys.readouterr().out.strip() == "linux-x64 natives-linux"
    
    def test_detect_given_strings(self, capsys):
        assert main.main(["detect", "--os", "Mac OS X", "--arch", "aarch64"]) == 0
        assert capsys.readouterr().out.strip() == "macos-arm64 natives-macos-arm64"
    
    def test_detect_env_override(self, capsys, monkeypatch):
        monkeypatch.setenv("NATIVESET_PLATFORM", "windows-x86")
        assert main.main(["detect"]) == 0
        assert capsys.readouterr().out.strip() == "windows-x86 natives-windows-x86"
    
    def test_detect_unsupported(self, capsys):
        result = main.main(["detect", "--os", "Plan9", "--arch", "mips"])
        assert result == ExitCode.UNSUPPORTED_PLATFORM
        err = capsys.readouterr().err
        assert "ERROR" in err
        assert "Plan9" in err
    
    def test_detect_unknown_override(self, capsys, monkeypatch):
        monkeypatch.setenv("NATIVESET_PLATFORM", "bogus")
        assert main.main(["detect"]) == ExitCode.UNSUPPORTED_PLATFORM
        err = capsys.readouterr().err
        assert "Unknown platform tag 'bogus'" in err
        assert "arch=" not in err
    
    def test_detect_verbose(self, capsys):
        main.main(["-v", "detect"])
        assert "os='Linux'" in capsys.readouterr().err


class TestComposeCommand:
    """Tests for `nativeset compose`."""
    
    def test_compose_core_gradle(self, capsys):
        assert main.main(["compose"]) == 0
        out = capsys.readouterr().out
        
        assert out.startswith("dependencies {\n")
        assert 'api(platform("org.lwjgl:lwjgl-bom:3.3.4"))' in out
        assert 'api("org.lwjgl:lwjgl-glfw") { artifact { classifier = "natives-linux" } }' in out
        assert 'implementation("org.lwjgl:lwjgl-opengl")' in out
        assert 'api("org.lwjgl:lwjgl-opengl") { artifact { classifier = "natives-linux" } }' in out
        assert "lwjgl-egl\") {" not in out
        assert "freetype" not in out
    
    def test_compose_text_for_platform(self, capsys):
        assert main.main(["compose", "--platform", "macos-arm64", "--profile", "text", "-f", "text"]) == 0
        lines = capsys.readouterr().out.splitlines()
        
        assert "org.lwjgl:lwjgl-harfbuzz" in lines
        assert "org.lwjgl:lwjgl-harfbuzz::natives-macos-arm64" not in lines
        assert "org.lwjgl:lwjgl-freetype::natives-macos-arm64" in lines
    
    def test_compose_all_platforms(self, capsys):
        assert main.main(["compose", "--all-platforms", "-f", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        
        classifiers = {d["classifier"] for d in data["dependencies"] if d["artifact"] == "lwjgl"}
        assert classifiers == {
            None,
            "natives-linux", "natives-linux-arm64", "natives-linux-arm32",
            "natives-macos", "natives-macos-arm64",
            "natives-windows", "natives-windows-arm64", "natives-windows-x86",
        }
    
    def test_compose_custom_library_set(self, tmp_path: Path, capsys):
        path = tmp_path / "libs.yml"
        path.write_text("group: org.example\nversion: '1.0'\nlibraries: [zeta, alpha]\n")
        
        assert main.main(["compose", "-l", str(path), "-p", "all", "-f", "text"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "org.example:zeta:1.0",
            "org.example:zeta:1.0:natives-linux",
            "org.example:alpha:1.0",
            "org.example:alpha:1.0:natives-linux",
        ]
    
    def test_compose_flags_override_env(self, capsys, monkeypatch):
        monkeypatch.setenv("NATIVESET_PROFILE", "freetype")
        monkeypatch.setenv("NATIVESET_PLATFORM", "windows-arm64")
        
        assert main.main(["compose", "-f", "text"]) == 0
        assert "org.lwjgl:lwjgl-freetype::natives-windows-arm64" in capsys.readouterr().out.splitlines()
        
        assert main.main(["compose", "-p", "core", "--platform", "linux-x64", "-f", "text"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert "org.lwjgl:lwjgl::natives-linux" in lines
        assert not any("freetype" in line for line in lines)
    
    def test_compose_unknown_profile(self, capsys):
        assert main.main(["compose", "--profile", "vulkan"]) == ExitCode.CONFIG_ERROR
        assert "Unknown profile 'vulkan'" in capsys.readouterr().err
    
    def test_compose_malformed_library_set(self, tmp_path: Path, capsys):
        path = tmp_path / "libs.yml"
        path.write_text("libraries:\n  - name: x\n    natives: false\n    exclude: [macos-x64]\n")
        
        assert main.main(["compose", "-l", str(path)]) == ExitCode.CONFIG_ERROR
        assert "Malformed descriptor" in capsys.readouterr().err
    
    def test_compose_unsupported_host(self, capsys, monkeypatch):
        monkeypatch.setattr(host, "HOST_OS_NAME", "Plan9")
        clear_host_cache()
        assert main.main(["compose"]) == ExitCode.UNSUPPORTED_PLATFORM
    
    def test_compose_very_verbose_lists_entries(self, capsys):
        main.main(["-vv", "compose"])
        err = capsys.readouterr().err
        assert "platform: linux-x64" in err
        assert "lwjgl-stb native natives-linux" in err


class TestProfilesCommand:
    """Tests for `nativeset profiles`."""
    
    def test_lists_bundled_profiles(self, capsys):
        assert main.main(["profiles"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("core: lwjgl, lwjgl-assimp")
        assert "freetype:" in out
        assert "text:" in out
