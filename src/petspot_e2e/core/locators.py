"""XPath locator builders for the test id convention.

Web elements carry ``data-testid`` values shaped like
``screenName.elementName[.subElement][.action]``; Android exposes the same
value as ``content-desc`` and iOS as ``name``.
"""

import re

TEST_ID_PATTERN = re.compile(r"^[a-z][A-Za-z0-9]*(\.[A-Za-z0-9][A-Za-z0-9-]*)+$")


def by_test_id(test_id: str) -> str:
    """Exact-match XPath for a ``data-testid`` value."""
    return f"//*[@data-testid='{test_id}']"


def containing_test_id(fragment: str) -> str:
    """Substring-match XPath for ``data-testid`` values."""
    return f"//*[contains(@data-testid, '{fragment}')]"


def by_test_id_family(prefix: str) -> str:
    """Elements whose test id is ``prefix`` plus exactly one more segment.

    ``landing.hero.featureCard.`` matches ``landing.hero.featureCard.search``
    but not its children such as ``landing.hero.featureCard.search.title``.
    """
    return (
        f"//*[starts-with(@data-testid, '{prefix}') and "
        f"not(contains(substring-after(@data-testid, '{prefix}'), '.'))]"
    )


def by_content_desc(tag: str) -> str:
    return f"//*[@content-desc='{tag}']"


def containing_content_desc(fragment: str) -> str:
    return f"//*[contains(@content-desc, '{fragment}')]"


def by_ios_name(tag: str) -> str:
    return f"//*[@name='{tag}']"


def containing_ios_name(fragment: str) -> str:
    return f"//*[contains(@name, '{fragment}')]"


def xpath(expression: str) -> str:
    """Prefix an XPath for Playwright's selector engine."""
    return f"xpath={expression}"


def is_conventional_test_id(test_id: str) -> bool:
    """Check a test id against ``screenName.elementName[.subElement].action``.

    Documentation aid only; page objects do not enforce it.
    """
    return bool(TEST_ID_PATTERN.match(test_id))
