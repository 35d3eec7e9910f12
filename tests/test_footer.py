import os
import sys

# ensure the package root is discoverable when pytest adjusts sys.path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import app.branding as branding


def _capture(monkeypatch):
    captured = []

    def fake_markdown(html, unsafe_allow_html=False):
        captured.append(html)

    monkeypatch.setattr(branding.st, "markdown", fake_markdown)
    return captured


def test_footer_markup(monkeypatch):
    """The footer uses the ``ent-footer`` class and carries the legal line."""
    captured = _capture(monkeypatch)
    branding.render_footer()
    assert len(captured) == 1
    footer = captured[0]
    assert 'class="ent-footer"' in footer
    assert "All rights reserved" in footer


def test_headline_colour_follows_sign(monkeypatch):
    captured = _capture(monkeypatch)
    branding.render_headline("net benefit", 10.0)
    branding.render_headline("net cost", -10.0)
    branding.render_headline("not computable", None)
    assert "positive-value" in captured[0]
    assert "negative-value" in captured[1]
    assert "neutral-value" in captured[2]


def test_user_text_is_escaped(monkeypatch):
    captured = _capture(monkeypatch)
    branding.render_field_error("<b>bad</b>")
    assert "&lt;b&gt;bad&lt;/b&gt;" in captured[0]


def test_empty_field_error_renders_nothing(monkeypatch):
    captured = _capture(monkeypatch)
    branding.render_field_error("")
    assert captured == []
