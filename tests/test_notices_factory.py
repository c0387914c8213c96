"""Unit tests for the notice factory and the Notice model.

Tests:
- Deprecation detection (absent descriptor, supported and deprecated versions)
- Message and Markdown rendering
- Upgrade list formatting
- Notice immutability and serialisation
"""

import pytest
from pydantic import ValidationError

from tests.helpers import EqualityOnlyVersion, StaticPackageManager
from updater.notices.factory import (
    DEPRECATION_TITLE,
    create_deprecation_notice,
    format_supported_versions,
    markdown_from_message,
)
from updater.notices.models import Notice, NoticeMode
from updater.package_managers import PackageManager


BUNDLER_V1_MESSAGE = (
    "Dependabot will stop supporting `bundler v1`!\n"
    "Please upgrade to one of the following versions: `v2`, or `v3`.\n"
)

BUNDLER_V1_MARKDOWN = (
    "> [!WARNING]\n"
    "> Dependabot will stop supporting `bundler v1`!\n>\n"
    "> Please upgrade to one of the following versions: `v2`, or `v3`.\n>\n"
)


class TestCreateDeprecationNotice:
    """Tests for create_deprecation_notice."""

    def test_returns_none_without_package_manager(self):
        """No descriptor means no notice."""
        assert create_deprecation_notice(None) is None

    def test_returns_none_for_supported_version(self, supported_bundler):
        """A version outside the deprecated set produces no notice."""
        assert create_deprecation_notice(supported_bundler) is None

    def test_builds_notice_for_deprecated_version(self, deprecated_bundler):
        """A deprecated version produces a fully populated WARN notice."""
        notice = create_deprecation_notice(deprecated_bundler)

        assert notice is not None
        assert notice.mode == "WARN"
        assert notice.type == "bundler_deprecated_warn"
        assert notice.package_manager_name == "bundler"
        assert notice.title == DEPRECATION_TITLE
        assert notice.title == "Package manager deprecation notice"
        assert notice.message == BUNDLER_V1_MESSAGE
        assert notice.markdown == BUNDLER_V1_MARKDOWN

    def test_accepts_plain_int_versions(self):
        """Descriptors may report versions as plain ints."""
        package_manager = StaticPackageManager(
            "bundler", 1, deprecated_versions={1}, supported_versions=[2, 3]
        )

        notice = create_deprecation_notice(package_manager)

        assert notice.message == BUNDLER_V1_MESSAGE

    def test_accepts_equality_only_versions(self):
        """Versions that cannot be ordered still render in declared order."""
        package_manager = StaticPackageManager(
            "bundler",
            EqualityOnlyVersion("1"),
            deprecated_versions=[EqualityOnlyVersion("1")],
            supported_versions=[EqualityOnlyVersion("2"), EqualityOnlyVersion("3")],
        )

        notice = create_deprecation_notice(package_manager)

        assert notice.message == BUNDLER_V1_MESSAGE
        assert notice.markdown == BUNDLER_V1_MARKDOWN

    def test_single_supported_version_has_no_connective(self):
        """One upgrade target is listed on its own."""
        package_manager = PackageManager(
            "npm", "6", deprecated_versions=["6"], supported_versions=["7"]
        )

        notice = create_deprecation_notice(package_manager)

        assert notice.type == "npm_deprecated_warn"
        assert notice.message == (
            "Dependabot will stop supporting `npm v6`!\n"
            "Please upgrade to one of the following versions: `v7`.\n"
        )

    def test_empty_supported_versions_renders_empty_clause(self):
        """An empty supported set still yields a notice with an empty list."""
        package_manager = StaticPackageManager(
            "pip", "2", deprecated_versions=["2"], supported_versions=[]
        )

        notice = create_deprecation_notice(package_manager)

        assert notice is not None
        assert notice.message.endswith(
            "Please upgrade to one of the following versions: .\n"
        )

    def test_version_outside_deprecated_list_is_ignored_even_if_unsupported(self):
        """Membership in the deprecated set is the only deprecation signal."""
        package_manager = StaticPackageManager(
            "composer", "0", deprecated_versions=["1"], supported_versions=["2"]
        )

        assert create_deprecation_notice(package_manager) is None


class TestFormatSupportedVersions:
    """Tests for format_supported_versions."""

    @pytest.mark.parametrize(
        "versions,expected",
        [
            ([], ""),
            ([2], "`v2`"),
            ([2, 3], "`v2`, or `v3`"),
            ([2, 3, 4], "`v2`, `v3`, or `v4`"),
            (["9", "10"], "`v9`, or `v10`"),
        ],
    )
    def test_formats_versions(self, versions, expected):
        """Versions are quoted in the given order and joined with a final 'or'."""
        assert format_supported_versions(versions) == expected

    def test_keeps_declared_order(self):
        """Upgrade targets are not reordered."""
        package_manager = PackageManager(
            "yarn", "1", supported_versions=["10", "2", "3.1", "2"]
        )

        assert (
            format_supported_versions(package_manager.supported_versions)
            == "`v10`, `v2`, or `v3.1`"
        )


class TestMarkdownFromMessage:
    """Tests for markdown_from_message."""

    def test_wraps_each_line_in_alert_block(self):
        """Each line is quoted and followed by an empty quoted line."""
        assert markdown_from_message(BUNDLER_V1_MESSAGE) == BUNDLER_V1_MARKDOWN

    @pytest.mark.parametrize(
        "mode,kind",
        [("INFO", "NOTE"), ("WARN", "WARNING"), ("ERROR", "CAUTION")],
    )
    def test_alert_kind_follows_mode(self, mode, kind):
        """The alert kind depends on the notice mode."""
        markdown = markdown_from_message("Heads up\n", mode)

        assert markdown == f"> [!{kind}]\n> Heads up\n>\n"


class TestNoticeModel:
    """Tests for the Notice model."""

    @pytest.fixture
    def notice(self):
        return Notice(
            mode=NoticeMode.WARN,
            type="bundler_deprecated_warn",
            package_manager_name="bundler",
            title=DEPRECATION_TITLE,
            message=BUNDLER_V1_MESSAGE,
            markdown=BUNDLER_V1_MARKDOWN,
        )

    def test_mode_is_stored_as_string(self, notice):
        """Enum modes are stored as their string value."""
        assert notice.mode == "WARN"
        assert isinstance(notice.mode, str)

    def test_notice_is_immutable(self, notice):
        """Fields cannot be reassigned after construction."""
        with pytest.raises(ValidationError):
            notice.message = "changed"

    def test_rejects_unknown_mode(self):
        """Only INFO, WARN and ERROR are valid modes."""
        with pytest.raises(ValidationError):
            Notice(
                mode="DEBUG",
                type="x_warn",
                package_manager_name="x",
                title="Title",
                message="Message\n",
                markdown="> [!NOTE]\n> Message\n>\n",
            )

    @pytest.mark.parametrize("missing", ["title", "message", "markdown"])
    def test_requires_every_field(self, notice, missing):
        """A notice cannot be built with only some of its fields."""
        fields = notice.to_dict()
        del fields[missing]

        with pytest.raises(ValidationError):
            Notice(**fields)

    def test_to_dict(self, notice):
        """to_dict exposes all six fields."""
        assert notice.to_dict() == {
            "mode": "WARN",
            "type": "bundler_deprecated_warn",
            "package_manager_name": "bundler",
            "title": "Package manager deprecation notice",
            "message": BUNDLER_V1_MESSAGE,
            "markdown": BUNDLER_V1_MARKDOWN,
        }
