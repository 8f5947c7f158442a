import unittest

from ocp_versions.common.errors import InvalidVersionFormat, UnexpectedOutputError
from ocp_versions.version_resolver.version_utils import (
    filter_registry_tags,
    filter_upstream_releases,
    is_greater_or_equal_to_base_version,
    is_prerelease,
    parse_bare_version,
    strip_version_prefix,
    version_ordinal,
)

openshift_version_output = (
    "openshift v3.6.1+c4dd4cf\n"
    "kubernetes v1.6.1+5115d708d7\n"
    "etcd 3.2.1\n"
)


class TestParseBareVersion(unittest.TestCase):

    def test_release_output(self):
        self.assertEqual(parse_bare_version(openshift_version_output), "3.6.1")

    def test_other_versions(self):
        for version in ["3.7.0", "3.10.45", "1.5.1"]:
            output = f"openshift v{version}+abcdef0\nkubernetes v1.7.6+a08f5eeb62\n"
            self.assertEqual(parse_bare_version(output), version)

    def test_without_commit(self):
        self.assertEqual(parse_bare_version("openshift v3.9.0\n"), "3.9.0")

    def test_without_prefix(self):
        self.assertEqual(parse_bare_version("openshift 3.9.0+abc\n"), "3.9.0")

    def test_prerelease_kept(self):
        self.assertEqual(parse_bare_version("openshift v3.7.0-alpha.1+1a2b3c\n"), "3.7.0-alpha.1")

    def test_token_not_validated(self):
        self.assertEqual(parse_bare_version("openshift unknown\n"), "unknown")

    def test_single_token_raises_error(self):
        with self.assertRaises(UnexpectedOutputError):
            parse_bare_version("openshift\nkubernetes v1.6.1\n")

    def test_empty_output_raises_error(self):
        with self.assertRaises(UnexpectedOutputError):
            parse_bare_version("")


class TestIsGreaterOrEqualToBaseVersion(unittest.TestCase):

    def test_greater(self):
        self.assertTrue(is_greater_or_equal_to_base_version("v3.6.1", "v3.5.0"))

    def test_lower(self):
        self.assertFalse(is_greater_or_equal_to_base_version("v3.5.0", "v3.6.1"))

    def test_equal(self):
        self.assertTrue(is_greater_or_equal_to_base_version("v3.6.0", "v3.6.0"))

    def test_without_prefix(self):
        self.assertTrue(is_greater_or_equal_to_base_version("3.10.0", "v3.9.0"))

    def test_prerelease_below_release(self):
        self.assertFalse(is_greater_or_equal_to_base_version("v3.7.0-alpha.0", "v3.7.0"))
        self.assertTrue(is_greater_or_equal_to_base_version("v3.7.0-alpha.0", "v3.6.0"))

    def test_invalid_version_raises_error(self):
        with self.assertRaises(InvalidVersionFormat) as context:
            is_greater_or_equal_to_base_version("notaversion", "v3.5.0")
        self.assertIn("Invalid version format 'notaversion'", str(context.exception))

    def test_invalid_base_version_raises_error(self):
        with self.assertRaises(InvalidVersionFormat):
            is_greater_or_equal_to_base_version("v3.6.1", "v3.5")

    def test_invalid_version_is_value_error(self):
        with self.assertRaises(ValueError):
            is_greater_or_equal_to_base_version("v3", "v3.5.0")


class TestVersionHelpers(unittest.TestCase):

    def test_strip_prefix(self):
        self.assertEqual(strip_version_prefix("v3.6.1"), "3.6.1")
        self.assertEqual(strip_version_prefix("3.6.1"), "3.6.1")
        self.assertEqual(strip_version_prefix("vv3.6.1"), "v3.6.1")

    def test_prerelease(self):
        for tag in ["v3.7.0-alpha.0", "v3.7.0-beta.1", "v3.7.0-rc.0", "v3.7.0rc1"]:
            self.assertTrue(is_prerelease(tag), tag)

    def test_not_prerelease(self):
        for tag in ["v3.7.0", "v3.7.0-ALPHA", "v3.6.1-1"]:
            self.assertFalse(is_prerelease(tag), tag)

    def test_ordinal_numeric_components(self):
        self.assertGreater(version_ordinal("v3.10.0"), version_ordinal("v3.9.0"))
        self.assertGreater(version_ordinal("v3.6.1"), version_ordinal("v3.5.0"))
        self.assertEqual(version_ordinal("v3.06.1"), version_ordinal("v3.6.1"))

    def test_ordinal_zero_component(self):
        self.assertEqual(version_ordinal("v3.0.0"), "v\x013.\x010.\x010")

    def test_ordinal_latest_below_versions(self):
        self.assertLess(version_ordinal("latest"), version_ordinal("v3.5.0"))


class TestFilterRegistryTags(unittest.TestCase):

    def test_latest_and_hyphen_excluded(self):
        tags = ["v3.6.1", "latest", "v3.6.1-rc1"]
        self.assertEqual(filter_registry_tags(tags, "v3.5.0"), ["v3.6.1"])

    def test_below_minimum_excluded(self):
        tags = ["v3.4.1", "v3.5.0", "v3.5.5", "v3.6.0"]
        self.assertEqual(filter_registry_tags(tags, "v3.5.0"), ["v3.5.0", "v3.5.5", "v3.6.0"])

    def test_high_versions_with_latest_excluded(self):
        tags = ["v9.9.9-latest", "v9.9.9.latest", "v9.9.9"]
        self.assertEqual(filter_registry_tags(tags, "v3.5.0"), ["v9.9.9"])

    def test_lexical_ordering(self):
        # Sorted as plain strings, so v3.10.0 comes before v3.2.0
        tags = ["v3.2.0", "v3.10.0", "v3.9.0"]
        self.assertEqual(filter_registry_tags(tags, "v3.0.0"), ["v3.10.0", "v3.2.0", "v3.9.0"])

    def test_empty(self):
        self.assertEqual(filter_registry_tags([], "v3.5.0"), [])


class TestFilterUpstreamReleases(unittest.TestCase):

    def test_prerelease_below_default_excluded(self):
        releases = ["v3.7.0-alpha.0", "v3.6.1", "v3.8.0"]
        self.assertEqual(filter_upstream_releases(releases, "v3.5.0", "v3.7.0"), ["v3.6.1", "v3.8.0"])

    def test_prerelease_above_default_included(self):
        releases = ["v3.8.0-alpha.1", "v3.7.0-rc.0", "v3.7.0"]
        self.assertEqual(filter_upstream_releases(releases, "v3.5.0", "v3.7.0"),
                         ["v3.7.0", "v3.8.0-alpha.1"])

    def test_below_minimum_excluded(self):
        releases = ["v1.5.1", "v3.5.0", "v3.6.0"]
        self.assertEqual(filter_upstream_releases(releases, "v3.6.0", "v3.7.0"), ["v3.6.0"])

    def test_latest_excluded(self):
        releases = ["v3.9.0-latest", "v3.9.0"]
        self.assertEqual(filter_upstream_releases(releases, "v3.5.0", "v3.7.0"), ["v3.9.0"])

    def test_unparseable_release_dropped(self):
        releases = ["v3.9.0", "origin v3.9", "", "v3.10"]
        with self.assertLogs("ocp_versions", level="WARNING") as logs:
            result = filter_upstream_releases(releases, "v3.5.0", "v3.7.0")
        self.assertEqual(result, ["v3.9.0"])
        self.assertEqual(len(logs.output), 3)

    def test_lexical_ordering(self):
        releases = ["v3.2.0", "v3.10.0", "v3.9.0"]
        self.assertEqual(filter_upstream_releases(releases, "v3.0.0", "v3.0.0"),
                         ["v3.10.0", "v3.2.0", "v3.9.0"])

    def test_invalid_minimum_raises_error(self):
        with self.assertRaises(InvalidVersionFormat):
            filter_upstream_releases(["v3.9.0"], "latest", "v3.7.0")

    def test_invalid_default_raises_error(self):
        with self.assertRaises(InvalidVersionFormat):
            filter_upstream_releases(["v3.9.0"], "v3.5.0", "3.7")


if __name__ == '__main__':
    unittest.main()
