"""
Variables connues : descripteurs globaux, valeurs d'exemple pour l'aperçu,
et variables disponibles par slug.

SAMPLE_VALUES ne sert qu'à l'aperçu ; à l'envoi, les vraies données passent
par substitute() côté livraison.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel


class VariableDescriptor(BaseModel):
    name: str
    description: str
    example: str
    label: Optional[str] = None


# (name, label, description, example)
_GLOBAL_VARIABLES = [
    ("userName",            "User Name",             "Recipient's name",               "John Doe"),
    ("companyName",         "Company Name",          "Company's name",                 "Acme Corp"),
    ("offerTitle",          "Offer Title",           "Name of the offer",              "Summer Sale Promotion"),
    ("amount",              "Amount",                "Payment amount",                 "$500.00"),
    ("grossAmount",         "Gross Amount",          "Amount before fees",             "$550.00"),
    ("platformFee",         "Platform Fee",          "Platform fee amount",            "$22.00"),
    ("processingFee",       "Processing Fee",        "Processing fee amount",          "$16.50"),
    ("trackingLink",        "Tracking Link",         "Unique affiliate tracking URL",  "https://track.example.com/abc123"),
    ("trackingCode",        "Tracking Code",         "Unique tracking code",           "ABC123"),
    ("linkUrl",             "Action Link",           "Link to relevant page",          "https://app.example.com/dashboard"),
    ("transactionId",       "Transaction ID",        "Payment transaction reference",  "TXN-12345"),
    ("reviewRating",        "Review Rating",         "Star rating (1-5)",              "5"),
    ("reviewText",          "Review Text",           "Review content",                 "Great service!"),
    ("messagePreview",      "Message Preview",       "Preview of message",             "Hello, I wanted to discuss..."),
    ("daysUntilExpiration", "Days Until Expiration", "Countdown for expiring items",   "7"),
    ("otpCode",             "OTP Code",              "Verification code",              "123456"),
    ("verificationUrl",     "Verification URL",      "Email verification link",        "https://app.example.com/verify/abc"),
    ("resetUrl",            "Password Reset URL",    "Password reset link",            "https://app.example.com/reset/abc"),
    ("applicationId",       "Application ID",        "Application reference",          "APP-12345"),
    ("reason",              "Reason",                "Reason for action",              "Content policy violation"),
]

VARIABLES: List[VariableDescriptor] = [
    VariableDescriptor(name=n, label=lbl, description=d, example=ex)
    for n, lbl, d, ex in _GLOBAL_VARIABLES
]

SAMPLE_VALUES: Dict[str, str] = {
    "userName":            "John Doe",
    "companyName":         "Acme Corp",
    "offerTitle":          "Summer Sale Promotion",
    "amount":              "$500.00",
    "grossAmount":         "$550.00",
    "platformFee":         "$22.00",
    "processingFee":       "$16.50",
    "transactionId":       "TXN-12345",
    "trackingLink":        "https://track.example.com/abc123",
    "trackingCode":        "ABC123",
    "linkUrl":             "https://app.example.com/dashboard",
    "reviewRating":        "5",
    "reviewText":          "Great service and professional team!",
    "messagePreview":      "Hello, I wanted to discuss the campaign details...",
    "daysUntilExpiration": "7",
    "otpCode":             "123456",
    "verificationUrl":     "https://app.example.com/verify/abc",
    "resetUrl":            "https://app.example.com/reset/abc",
    "applicationId":       "APP-12345",
    "reason":              "Content policy violation",
    "announcementTitle":   "New Features Available",
    "announcementMessage": "We have added exciting new features to improve your experience.",
}


# ── Variables par slug ──────────────────────────────────────────────────────
# (name, description, example)

_USER    = ("userName", "Recipient's name", "John")
_OFFER   = ("offerTitle", "Title of the offer", "Premium SEO Package")
_COMPANY = ("companyName", "Company name", "Acme Corp")
_AMOUNT  = ("amount", "Payment amount", "$930.00")
_GROSS   = ("grossAmount", "Gross amount before fees", "$1,000.00")
_PFEE    = ("platformFee", "Platform fee", "$40.00")
_XFEE    = ("processingFee", "Processing fee", "$30.00")
_TXN     = ("transactionId", "Payment transaction ID", "tr_abc123xyz")
_PAYMENT = ("paymentId", "Payment ID", "pay_789")
_CONTRACT = ("contractTitle", "Retainer contract title", "Monthly Content Package")
_OTP     = ("otpCode", "6-digit verification code", "123456")


def _link(example: str, description: str = "Link to details") -> tuple:
    return ("linkUrl", description, example)


_SLUG_VARIABLES: Dict[str, list] = {
    # Application
    "application-status-change": [
        _USER, _OFFER,
        ("applicationId", "Application ID", "app_123abc"),
        ("applicationStatus", "New status (approved/rejected/pending)", "approved"),
        ("trackingLink", "Creator's tracking link (for approved)", "https://example.com/go/ABC123"),
        ("trackingCode", "Tracking code (for approved)", "ABC123"),
        _link("/applications/app_123", "Link to application details"),
    ],
    "new-application": [
        _USER, _COMPANY, _OFFER,
        ("applicationId", "Application ID", "app_123abc"),
        ("offerId", "Offer ID", "offer_456def"),
        _link("/admin/offers", "Link to review the application"),
    ],

    # Payment
    "payment-received": [
        _USER, _OFFER, _AMOUNT, _GROSS, _PFEE, _XFEE, _TXN, _PAYMENT,
        _link("/payments/pay_789", "Link to payment details"),
    ],
    "payment-pending": [
        _USER, _OFFER, _AMOUNT, _PAYMENT,
        _link("/settings/payment", "Link to payment or settings"),
    ],
    "payment-approved": [
        _USER, _COMPANY, _OFFER, _AMOUNT, _GROSS, _PFEE, _XFEE, _TXN, _PAYMENT,
        _link("/payments/pay_789", "Link to payment details"),
    ],
    "payment-failed-insufficient-funds": [
        _USER, _COMPANY, _AMOUNT, _GROSS, _PFEE, _XFEE, _PAYMENT,
        _link("/payments/pay_789", "Link to payment details"),
    ],
    "payment-disputed": [
        _USER, _OFFER, _AMOUNT, _PAYMENT,
        _link("/messages", "Link to messages"),
    ],
    "payment-dispute-resolved": [_PAYMENT],
    "payment-refunded": [_PAYMENT],

    # Offer
    "offer-approved": [_USER, _OFFER, _link("/company/offers/offer_123", "Link to the offer")],
    "offer-rejected": [_USER, _OFFER, _link("/company/offers/offer_123", "Link to the offer")],
    "offer-delete-requested": [
        ("userName", "Admin name", "Admin"),
        ("companyName", "Company requesting deletion", "Acme Corp"),
        _OFFER,
        ("reason", "Reason for deletion request", "Product discontinued"),
        _link("/admin-offer-detail/offer_123", "Link to review the request"),
    ],
    "offer-delete-approved": [
        _USER, ("offerTitle", "Title of the deleted offer", "Premium SEO Package"),
        _link("/company/offers", "Link to offers page"),
    ],
    "offer-delete-rejected": [_USER, _OFFER, _link("/company/offers/offer_123", "Link to the offer")],
    "offer-suspend-requested": [
        ("userName", "Admin name", "Admin"),
        ("companyName", "Company requesting suspension", "Acme Corp"),
        _OFFER,
        ("reason", "Reason for suspension request", "Seasonal pause"),
        _link("/admin-offer-detail/offer_123", "Link to review the request"),
    ],
    "offer-suspend-approved": [
        _USER, ("offerTitle", "Title of the suspended offer", "Premium SEO Package"),
        _link("/company/offers/offer_123", "Link to the offer"),
    ],
    "offer-suspend-rejected": [_USER, _OFFER, _link("/company/offers/offer_123", "Link to the offer")],
    "priority-listing-expiring": [
        _USER, _OFFER,
        ("daysUntilExpiration", "Days until expiration", "3"),
        ("offerId", "Offer ID", "offer_123"),
        _link("/company/offers/offer_123", "Link to renew"),
    ],
    "work-completion-approval": [
        _USER, _OFFER, ("amount", "Payment amount", "$500.00"),
        _link("/applications/app_123"),
    ],
    "deliverable-rejected": [
        _USER, _CONTRACT,
        ("reason", "Rejection reason/feedback", "Please revise the intro section"),
        _link("/retainers/contract_123", "Link to deliverable"),
    ],
    "revision-requested": [
        _USER, _CONTRACT,
        ("revisionInstructions", "Revision instructions", "Please update the call-to-action"),
        _link("/retainers/contract_123", "Link to deliverable"),
    ],

    # Company
    "registration-approved": [_USER, _link("/company/dashboard", "Link to dashboard")],
    "registration-rejected": [_USER, _link("/contact", "Link to contact support")],

    # System
    "system-announcement": [
        _USER,
        ("announcementTitle", "Announcement title", "New Feature Launch"),
        ("announcementMessage", "Announcement content", "We have exciting news..."),
        _link("/blog/new-feature", "Learn more link"),
    ],
    "new-message": [
        _USER, ("companyName", "Sender company name", "Acme Corp"), _OFFER,
        ("messagePreview", "Preview of the message", "Hi, I wanted to discuss..."),
        _link("/messages/conv_123", "Link to conversation"),
    ],
    "review-received": [
        _USER,
        ("reviewRating", "Star rating (1-5)", "5"),
        ("reviewText", "Review content", "Great experience working with this company!"),
        _link("/company/reviews", "Link to review"),
    ],

    # Moderation
    "content-flagged": [
        _USER,
        ("contentType", "Type of content (review, message)", "review"),
        ("contentId", "Content ID", "review_123"),
        ("matchedKeywords", "Flagged keywords (comma-separated)", "spam, inappropriate"),
        ("reviewStatus", "Review status", "pending"),
        ("actionTaken", "Action taken by moderator", "Content removed"),
        _link("/notifications", "Link to notifications"),
    ],

    # Authentication
    "email-verification": [_USER, ("verificationUrl", "Email verification link", "https://example.com/verify?token=abc123")],
    "password-reset": [_USER, ("resetUrl", "Password reset link", "https://example.com/reset?token=abc123")],
    "account-deletion-otp": [_USER, _OTP],
    "password-change-otp": [_USER, _OTP],
}


def variables_for_slug(slug: Optional[str] = None) -> List[VariableDescriptor]:
    """Variables proposées pour un slug ; sans slug (ou slug inconnu) → liste globale."""
    entries = _SLUG_VARIABLES.get(slug) if slug else None
    if entries is None:
        return list(VARIABLES)
    return [VariableDescriptor(name=n, description=d, example=ex) for n, d, ex in entries]
