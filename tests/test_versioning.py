"""Unit tests for version parsing, increments and latest-tag selection."""

import pytest

from wags_tags.exceptions import VersionParseError
from wags_tags.models import IncrementKind, SemanticVersion
from wags_tags.versioning import bump_version, increment_version, parse_version, select_latest_tag


class TestIncrementVersion:
    """Test version increments."""

    def test_basic_increments(self):
        assert increment_version("v0.0.7-dev-rc", "patch") == "0.0.8"
        assert increment_version("v0.0.7-dev-rc", "minor") == "0.1.0"
        assert increment_version("v0.0.7-dev-rc", "major") == "1.0.0"

    def test_suffixes_are_stripped(self):
        for tag in ("v0.0.7-dev-alpha", "v0.0.7-dev-beta", "v0.0.7-dev", "v0.0.7", "0.0.7"):
            assert increment_version(tag, IncrementKind.PATCH) == "0.0.8"

    def test_default_is_patch(self):
        assert increment_version("v1.2.3") == "1.2.4"

    def test_lower_parts_reset(self):
        assert bump_version("v3.4.5", IncrementKind.MINOR) == SemanticVersion(3, 5, 0)
        assert bump_version("v3.4.5", IncrementKind.MAJOR) == SemanticVersion(4, 0, 0)

    def test_no_upper_bound(self):
        assert increment_version("v999.0.0", "major") == "1000.0.0"

    def test_branch_suffix(self):
        assert increment_version("v0.1.0-feature-x", "minor") == "0.2.0"

    @pytest.mark.parametrize("version", ["", "v", "v1.2", "vx.y.z", "v1.2.3.4", "latest", "v-1.2.3"])
    def test_parse_error(self, version):
        with pytest.raises(VersionParseError):
            increment_version(version, "patch")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_version("v1.two.3")

    def test_unknown_increment_kind(self):
        with pytest.raises(ValueError):
            increment_version("v1.2.3", "huge")


class TestSelectLatestTag:
    """Test the ordering rule for latest-tag lookups."""

    TAGS = [
        "v0.9.0",
        "v0.10.0",
        "v0.10.0-alpha",
        "v0.2.0-dev",
        "v0.11.0-dev-rc",
        "v0.3.0-qa",
        "v1.0.0-prod",
        "v2.0.0-feature-x",
        "latest",
        "dev",
    ]

    def test_unscoped_uses_numeric_order(self):
        assert select_latest_tag(self.TAGS) == "v0.10.0"

    def test_unscoped_skips_prereleases(self):
        assert select_latest_tag(["v0.0.7", "v0.0.8-alpha", "v0.0.9-rc"]) == "v0.0.7"

    def test_environment_scope_skips_prereleases(self):
        assert select_latest_tag(self.TAGS, "dev") == "v0.2.0-dev"
        assert select_latest_tag(self.TAGS, "qa") == "v0.3.0-qa"
        assert select_latest_tag(["v0.0.7-dev", "v0.0.8-dev-rc"], "dev") == "v0.0.7-dev"

    def test_scope_with_custom_environment_name(self):
        tags = ["v1.0.0-staging", "v1.2.0-staging-beta", "v1.1.0-staging"]
        assert select_latest_tag(tags, "staging") == "v1.1.0-staging"

    def test_no_candidates(self):
        assert select_latest_tag([]) is None
        assert select_latest_tag(self.TAGS, "stg") is None
        assert select_latest_tag(["latest", "dev"]) is None

    def test_major_minor_patch_priority(self):
        tags = ["v1.9.9", "v2.0.0", "v1.10.0", "v2.0.1"]
        assert select_latest_tag(tags) == "v2.0.1"
