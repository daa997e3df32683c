"""Tests flux template : compile (sauvegarde), aperçu, traitement à l'envoi."""
import pytest

from email_composer.blocks.base import EmailBlock, VisualTemplate
from email_composer.catalog import SAMPLE_VALUES, instantiate
from email_composer.core.errors import ErrorCodes, MissingBlockProperty, TemplateIncomplete, UnknownBlockKind
from email_composer.records import EmailTemplateRecord
from email_composer.templates import (
    build_record,
    compile_template,
    preview,
    preview_record,
    process_record,
)


def _visual() -> VisualTemplate:
    return VisualTemplate(blocks=[
        EmailBlock(kind="greeting", content="Hi {{userName}},"),
        EmailBlock(kind="amount-display", content="{{amount}}"),
        EmailBlock(kind="button", content="Open", properties={"url": "{{linkUrl}}"}),
    ])


# ── compile_template ─────────────────────────────────────────────────────────

def test_compile_extracts_variables_in_order():
    compiled = compile_template("Payment: {{amount}}", _visual())
    assert compiled.available_variables == ["amount", "userName", "linkUrl"]
    assert "Hi {{userName}}," in compiled.html_content


def test_compile_camel_case_dump():
    dumped = compile_template("s", _visual()).model_dump(by_alias=True)
    assert set(dumped) == {"htmlContent", "availableVariables"}


@pytest.mark.parametrize("subject", ["", "   "])
def test_compile_rejects_blank_subject(subject):
    with pytest.raises(TemplateIncomplete) as exc:
        compile_template(subject, _visual())
    assert exc.value.field == "subject"
    assert exc.value.code == ErrorCodes.TEMPLATE_INCOMPLETE


def test_compile_rejects_empty_blocks():
    with pytest.raises(TemplateIncomplete) as exc:
        compile_template("Subject", VisualTemplate())
    assert exc.value.field == "blocks"
    assert exc.value.to_dict()["field"] == "blocks"


def test_compile_rejects_unknown_kind():
    visual = VisualTemplate(blocks=[EmailBlock(kind="marquee")])
    with pytest.raises(UnknownBlockKind):
        compile_template("Subject", visual)


def test_compile_rejects_button_without_url():
    visual = VisualTemplate(blocks=[EmailBlock(kind="button", content="Go")])
    with pytest.raises(MissingBlockProperty):
        compile_template("Subject", visual)


def test_build_record():
    record = build_record("payment-received", "Payment received: {{amount}}", instantiate("payment-received"),
                          name="Payment Received", category="payment")
    assert record.slug == "payment-received"
    assert record.category == "payment"
    assert record.visual_data is not None
    assert not record.is_legacy
    assert record.available_variables[0] == "amount"
    assert "transactionId" in record.available_variables


# ── Aperçu ───────────────────────────────────────────────────────────────────

def test_preview_substitutes_sample_values():
    p = preview("Payment: {{amount}}", _visual())
    assert p.subject == "Payment: $500.00"
    assert "Hi John Doe," in p.html
    assert "$500.00" in p.html
    assert 'href="https://app.example.com/dashboard"' in p.html
    assert "{{" not in p.html


def test_preview_custom_values_keep_unknown():
    p = preview("Hi {{userName}}", _visual(), {"userName": "Ada"})
    assert p.subject == "Hi Ada"
    assert "{{amount}}" in p.html


def test_preview_default_compositions():
    for slug in ("payment-received", "account-deletion-otp", "new-message"):
        p = preview("x", instantiate(slug))
        assert "{{userName}}" not in p.html
        assert SAMPLE_VALUES["userName"] in p.html


def test_preview_record_legacy_shows_banner_only():
    record = EmailTemplateRecord(slug="legacy", subject="Hello {{userName}}", html_content="<p>OLD</p>")
    p = preview_record(record)
    assert p.subject == "Hello John Doe"
    assert "OLD" not in p.html
    assert "Notification</h1>" in p.html


# ── Envoi ────────────────────────────────────────────────────────────────────

def test_process_record_substitutes_data():
    record = build_record("payment-received", "Payment received: {{amount}}", instantiate("payment-received"))
    out = process_record(record, {"userName": "Ada", "amount": "$10.00"})
    assert out.slug == "payment-received"
    assert out.subject == "Payment received: $10.00"
    assert "Hi Ada," in out.html
    assert "{{transactionId}}" in out.html


def test_process_record_inactive_is_skipped():
    record = EmailTemplateRecord(slug="payment-received", subject="s", html_content="<p>x</p>", is_active=False)
    assert process_record(record, {"userName": "Ada"}) is None
