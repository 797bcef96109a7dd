"""The web, Android and iOS suites."""

from typing import Final

from petspot_e2e.runners.suite import SuiteRunner

HOOK_GLUE: Final[tuple[str, ...]] = (
    "petspot_e2e.steps.hooks",
    "petspot_e2e.steps.common",
)

WEB_GLUE: Final[tuple[str, ...]] = (
    *HOOK_GLUE,
    "petspot_e2e.steps.web.landing_page_steps",
    "petspot_e2e.steps.web.navigation_steps",
    "petspot_e2e.steps.web.pet_list_steps",
)

MOBILE_GLUE: Final[tuple[str, ...]] = (
    *HOOK_GLUE,
    "petspot_e2e.steps.mobile.tab_navigation_steps",
    "petspot_e2e.steps.mobile.landing_page_steps",
    "petspot_e2e.steps.mobile.pet_details_steps",
)

WEB_RUNNER: Final[SuiteRunner] = SuiteRunner(
    name="web",
    features=("tests/e2e/web",),
    tags="@web and not @pending and not @pending-web and not @legacy",
    glue=WEB_GLUE,
    plugins=(
        "pretty",
        "html:reports/cucumber-reports/web/cucumber.html",
        "json:reports/cucumber-web.json",
        "junit:reports/cucumber-web.xml",
    ),
    skip_app_build=True,
)

ANDROID_RUNNER: Final[SuiteRunner] = SuiteRunner(
    name="android",
    features=("tests/e2e/mobile",),
    tags="@android and not @pending and not @legacy",
    glue=MOBILE_GLUE,
    plugins=(
        "pretty",
        "html:reports/cucumber-reports/android/cucumber.html",
        "json:reports/cucumber-android.json",
        "junit:reports/cucumber-android.xml",
    ),
)

IOS_RUNNER: Final[SuiteRunner] = SuiteRunner(
    name="ios",
    features=("tests/e2e/mobile",),
    tags="@ios and not @pending and not @legacy",
    glue=MOBILE_GLUE,
    plugins=(
        "pretty",
        "html:reports/cucumber-reports/ios/cucumber.html",
        "json:reports/cucumber-ios.json",
        "junit:reports/cucumber-ios.xml",
    ),
)

RUNNERS: Final[dict[str, SuiteRunner]] = {
    runner.name: runner for runner in (WEB_RUNNER, ANDROID_RUNNER, IOS_RUNNER)
}
