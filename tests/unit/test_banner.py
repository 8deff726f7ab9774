"""Tests for banner rendering."""

from datetime import date

import pytest

from assetpipe.banner import render_banner
from assetpipe.models import DEFAULT_BANNER, ConfigError


def test_default_banner():
    assert render_banner(DEFAULT_BANNER, "mypkg", date(2024, 1, 1)) == "/*! mypkg 2024-01-01 */\n"


def test_banner_is_deterministic():
    when = date(2023, 12, 31)
    assert render_banner(DEFAULT_BANNER, "x", when) == render_banner(DEFAULT_BANNER, "x", when)


def test_custom_template_with_literal_braces():
    out = render_banner("/* {name} @ {date} {{built}} */", "site", date(2024, 2, 29))
    assert out == "/* site @ 2024-02-29 {built} */"


@pytest.mark.parametrize("template", ["/*! {version} */", "/*! {0} */", "/*! {name */"])
def test_bad_templates_raise_config_error(template):
    with pytest.raises(ConfigError):
        render_banner(template, "mypkg", date(2024, 1, 1))
