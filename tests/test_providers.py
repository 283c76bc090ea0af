"""Unit tests for the fact providers."""

import pytest

from collectors import bsd, providers
from collectors.linux import linux_system
from core.escapes import esc
from shared import hardware
from conftest import FREEBSD, LINUX, OPENBSD, make_ctx


class TestFormatUptime:
    """Tests for format_uptime."""

    def test_zero(self) -> None:
        assert providers.format_uptime(0) == "0m"

    def test_under_a_minute_is_zero(self) -> None:
        assert providers.format_uptime(59) == "0m"

    def test_zero_minutes_omitted(self) -> None:
        assert providers.format_uptime(90000) == "1d 1h "

    def test_all_components(self) -> None:
        assert providers.format_uptime(2 * 86400 + 3 * 3600 + 4 * 60 + 5) == "2d 3h 4m "

    def test_zero_hours_omitted(self) -> None:
        assert providers.format_uptime(86400 + 60) == "1d 1m "

    def test_negative_is_zero(self) -> None:
        assert providers.format_uptime(-86400) == "0m"


class TestStripOemWords:
    """Tests for the OEM placeholder filter."""

    def test_all_placeholders(self) -> None:
        assert providers.strip_oem_words("To Be Filled By O.E.M.") == ""

    def test_keeps_real_words_in_order(self) -> None:
        text = "System Product Name ThinkPad T480 Not Specified 20L5"
        assert providers.strip_oem_words(text) == "ThinkPad T480 20L5"

    def test_case_variants(self) -> None:
        assert providers.strip_oem_words("to be filled by") == "to"


class TestFormatMemory:
    def test_both_known(self) -> None:
        assert providers.format_memory(512, 1024) == "512M / 1024M"

    def test_unknown_parts(self) -> None:
        assert providers.format_memory(None, 1024) == "?M / 1024M"
        assert providers.format_memory(None, None) == "?M / ?M"


class TestOs:
    """Tests for get_os."""

    def test_linux_distro(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(linux_system, "get_linux_distro", lambda kernel, environ: "Arch Linux")
        fact = providers.get_os(make_ctx(LINUX))
        assert (fact.name, fact.value) == ("os", "Arch Linux")

    def test_fallback_to_os_and_kernel(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(linux_system, "get_linux_distro", lambda kernel, environ: "")
        fact = providers.get_os(make_ctx(LINUX))
        assert fact.value == "Linux 6.1.0-18-amd64"

    def test_openbsd(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(bsd, "get_openbsd_distro", lambda release: f"OpenBSD {release}-current")
        assert providers.get_os(make_ctx(OPENBSD)).value == "OpenBSD 7.5-current"

    def test_freebsd_falls_back(self) -> None:
        assert providers.get_os(make_ctx(FREEBSD)).value == "FreeBSD 14.0-RELEASE"


class TestKernel:
    def test_linux(self) -> None:
        assert providers.get_kernel(make_ctx(LINUX)).value == "6.1.0-18-amd64"

    def test_skipped_on_bsd(self) -> None:
        assert providers.get_kernel(make_ctx(FREEBSD)) is None
        assert providers.get_kernel(make_ctx(OPENBSD)) is None


class TestHost:
    """Tests for get_host."""

    def test_oem_placeholder_falls_back_to_machine(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(linux_system, "read_first_line", lambda path: "To Be Filled By O.E.M.")
        assert providers.get_host(make_ctx(LINUX)).value == "x86_64"

    def test_concatenates_sources(self, monkeypatch: pytest.MonkeyPatch) -> None:
        values = {
            linux_system.HOST_FILES[0]: "20L5CTO1WW",
            linux_system.HOST_FILES[1]: "ThinkPad T480",
            linux_system.HOST_FILES[2]: "",
        }
        monkeypatch.setattr(linux_system, "read_first_line", values.get)
        assert providers.get_host(make_ctx(LINUX)).value == "20L5CTO1WW ThinkPad T480"

    def test_bsd_uses_sysctl(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(bsd, "sysctl", lambda *names: ["Default string"] if names == ("hw.model",) else [])
        assert providers.get_host(make_ctx(FREEBSD)).value == "amd64"


class TestUptime:
    def test_linux(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(linux_system, "read_file", lambda path: "90000.25 1234.00\n")
        assert providers.get_uptime(make_ctx(LINUX)).value == "1d 1h "

    def test_bsd_uses_boot_time(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(hardware, "get_uptime_seconds", lambda: 0)
        assert providers.get_uptime(make_ctx(FREEBSD)).value == "0m"

    def test_unavailable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(linux_system, "read_file", lambda path: "")
        assert providers.get_uptime(make_ctx(LINUX)) is None


class TestPkgs:
    """Counts under ten are not shown."""

    @pytest.mark.parametrize("count", [0, 1, 9])
    def test_small_counts_hidden(self, monkeypatch: pytest.MonkeyPatch, count: int) -> None:
        monkeypatch.setattr(linux_system, "get_linux_package_count", lambda environ: count)
        assert providers.get_pkgs(make_ctx(LINUX)) is None

    @pytest.mark.parametrize("count", [10, 1234])
    def test_shown(self, monkeypatch: pytest.MonkeyPatch, count: int) -> None:
        monkeypatch.setattr(linux_system, "get_linux_package_count", lambda environ: count)
        assert providers.get_pkgs(make_ctx(LINUX)).value == str(count)

    def test_bsd(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(bsd, "get_bsd_package_count", lambda os_name: 42)
        assert providers.get_pkgs(make_ctx(FREEBSD)).value == "42"


class TestMemory:
    """Tests for get_memory."""

    def test_mem_available(self, monkeypatch: pytest.MonkeyPatch) -> None:
        meminfo = "MemTotal:       1048576 kB\nMemFree:  1000 kB\nMemAvailable:    524288 kB\n"
        monkeypatch.setattr(linux_system, "read_file", lambda path: meminfo)
        assert providers.get_memory(make_ctx(LINUX)).value == "512M / 1024M"

    def test_missing_meminfo(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(linux_system, "read_file", lambda path: "")
        assert providers.get_memory(make_ctx(LINUX)).value == "?M / ?M"

    def test_bsd(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(bsd, "get_bsd_memory", lambda os_name: (100, 8192))
        assert providers.get_memory(make_ctx(FREEBSD)).value == "100M / 8192M"


class TestEnvironmentProviders:
    """de, shell and editor come straight from the environment."""

    def test_de_prefers_xdg(self) -> None:
        ctx = make_ctx(environ={"XDG_CURRENT_DESKTOP": "GNOME", "DESKTOP_SESSION": "gnome-xorg"})
        assert providers.get_de(ctx).value == "GNOME"

    def test_de_session_fallback(self) -> None:
        assert providers.get_de(make_ctx(environ={"DESKTOP_SESSION": "plasma"})).value == "plasma"

    def test_de_unset(self) -> None:
        assert providers.get_de(make_ctx(environ={})).value == ""

    def test_shell_basename(self) -> None:
        assert providers.get_shell(make_ctx(environ={"SHELL": "/usr/bin/zsh"})).value == "zsh"

    def test_editor_prefers_visual(self) -> None:
        ctx = make_ctx(environ={"VISUAL": "/usr/bin/nvim", "EDITOR": "/bin/vi"})
        assert providers.get_editor(ctx).value == "nvim"

    def test_editor_fallback(self) -> None:
        assert providers.get_editor(make_ctx(environ={"EDITOR": "/bin/vi"})).value == "vi"


class TestPalette:
    """Tests for get_palette."""

    def test_layout(self) -> None:
        fact = providers.get_palette(make_ctx())
        expected = esc("SGR", 7) + "".join(
            f"{esc('SGR', f'3{n}')} {esc('SGR', f'3{n}')} " for n in range(1, 7)
        ) + esc("SGR", 0)

        assert fact.label == expected
        assert fact.value == " "
        assert fact.show_separator is False
        assert fact.blank_before is True

    def test_no_escapes_without_color(self) -> None:
        fact = providers.get_palette(make_ctx(color=False))
        assert "\033" not in fact.label
