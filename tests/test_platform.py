"""Tests for platform parsing and URL sniffing."""

import pytest

from gitfiles.errors import InvalidPlatform, UnknownPlatform
from gitfiles.url.platform import Platform, detect_platform, parse_platform, select_platform


class TestParsePlatform:
    @pytest.mark.parametrize("value", ["github", "GitHub", "GITHUB"])
    def test_github_any_case(self, value):
        assert parse_platform(value) is Platform.GITHUB

    def test_gitlab(self):
        assert parse_platform("GitLab") is Platform.GITLAB

    def test_invalid(self):
        with pytest.raises(InvalidPlatform, match="bitbucket"):
            parse_platform("bitbucket")


class TestDetectPlatform:
    def test_github(self):
        assert detect_platform("https://github.com/o/r") is Platform.GITHUB

    def test_gitlab(self):
        assert detect_platform("https://gitlab.example.org/o/r") is Platform.GITLAB

    def test_both_substrings_prefers_github(self):
        assert detect_platform("https://gitlab.com/github/r") is Platform.GITHUB

    def test_case_sensitive(self):
        with pytest.raises(UnknownPlatform):
            detect_platform("https://GitHub.com/o/r")

    def test_custom_domain_unsupported(self):
        with pytest.raises(UnknownPlatform, match="--platform"):
            detect_platform("https://git.example.com/o/r")


class TestSelectPlatform:
    def test_explicit_wins_over_sniffing(self):
        assert select_platform("https://github.com/o/r", Platform.GITLAB) is Platform.GITLAB

    def test_explicit_bypasses_unknown_host(self):
        assert select_platform("https://git.example.com/o/r", Platform.GITHUB) is Platform.GITHUB

    def test_host_mapping(self):
        hosts = {"git.example.com": Platform.GITLAB}
        assert select_platform("https://git.example.com/o/r", hosts=hosts) is Platform.GITLAB

    def test_host_mapping_checked_before_sniffing(self):
        hosts = {"github.corp": Platform.GITLAB}
        assert select_platform("https://github.corp/o/r", hosts=hosts) is Platform.GITLAB

    def test_falls_back_to_sniffing(self):
        hosts = {"git.example.com": Platform.GITLAB}
        assert select_platform("https://github.com/o/r", hosts=hosts) is Platform.GITHUB
