"""Build notices from package manager descriptors."""

from typing import Iterable, Optional

from updater.package_managers import PackageManagerBase

from .models import Notice, NoticeMode

DEPRECATION_TITLE = "Package manager deprecation notice"

# GitHub alert kinds used for each notice mode
MARKDOWN_ALERT_KINDS = {
    NoticeMode.INFO.value: "NOTE",
    NoticeMode.WARN.value: "WARNING",
    NoticeMode.ERROR.value: "CAUTION",
}


def format_supported_versions(versions: Iterable) -> str:
    """Render upgrade targets as a backtick-quoted list.

    Versions are listed in the order given. When there is more than one,
    the last is prefixed with "or":

        [2]       -> `v2`
        [2, 3]    -> `v2`, or `v3`
        [2, 3, 4] -> `v2`, `v3`, or `v4`

    Args:
        versions: Version values, in display order

    Returns:
        The rendered list, or an empty string when there are no versions
    """
    quoted = [f"`v{version}`" for version in versions]

    if len(quoted) > 1:
        quoted[-1] = f"or {quoted[-1]}"

    return ", ".join(quoted)


def markdown_from_message(message: str, mode: str = NoticeMode.WARN.value) -> str:
    """Wrap a plain-text message in a GitHub alert block.

    Every line of the message is quoted and followed by an empty quoted
    line, so the alert renders with paragraph spacing.
    """
    markdown = f"> [!{MARKDOWN_ALERT_KINDS[mode]}]\n"
    for line in message.splitlines():
        markdown += f"> {line}\n>\n"
    return markdown


def create_deprecation_notice(
    package_manager: Optional[PackageManagerBase],
) -> Optional[Notice]:
    """Build a deprecation notice for a package manager.

    Args:
        package_manager: Descriptor for the job's package manager, or None

    Returns:
        A WARN notice when the detected version is deprecated, None otherwise
    """
    if package_manager is None:
        return None

    if package_manager.version not in package_manager.deprecated_versions:
        return None

    mode = NoticeMode.WARN.value
    name = package_manager.name
    supported = format_supported_versions(package_manager.supported_versions)

    # An empty supported list is passed through as an empty upgrade clause
    message = (
        f"Dependabot will stop supporting `{name} v{package_manager.version}`!\n"
        f"Please upgrade to one of the following versions: {supported}.\n"
    )

    return Notice(
        mode=mode,
        type=f"{name}_deprecated_warn",
        package_manager_name=name,
        title=DEPRECATION_TITLE,
        message=message,
        markdown=markdown_from_message(message, mode),
    )
