"""Type de notification (snake_case) → slug de template (kebab-case)."""
from typing import Dict, List, Optional

NOTIFICATION_TYPE_SLUGS: Dict[str, str] = {
    # Application
    "application_status_change":        "application-status-change",
    "new_application":                  "new-application",

    # Payment
    "payment_received":                 "payment-received",
    "payment_pending":                  "payment-pending",
    "payment_approved":                 "payment-approved",
    "payment_failed_insufficient_funds": "payment-failed-insufficient-funds",
    "payment_disputed":                 "payment-disputed",
    "payment_dispute_resolved":         "payment-dispute-resolved",
    "payment_refunded":                 "payment-refunded",

    # Offer
    "offer_approved":                   "offer-approved",
    "offer_rejected":                   "offer-rejected",
    "offer_delete_requested":           "offer-delete-requested",
    "offer_delete_approved":            "offer-delete-approved",
    "offer_delete_rejected":            "offer-delete-rejected",
    "offer_suspend_requested":          "offer-suspend-requested",
    "offer_suspend_approved":           "offer-suspend-approved",
    "offer_suspend_rejected":           "offer-suspend-rejected",

    # Company
    "registration_approved":            "registration-approved",
    "registration_rejected":            "registration-rejected",

    # System
    "system_announcement":              "system-announcement",
    "new_message":                      "new-message",
    "review_received":                  "review-received",
    "work_completion_approval":         "work-completion-approval",
    "priority_listing_expiring":        "priority-listing-expiring",

    # Retainer / deliverables
    "deliverable_rejected":             "deliverable-rejected",
    "deliverable_submitted":            "deliverable-submitted",
    "deliverable_resubmitted":          "deliverable-resubmitted",
    "revision_requested":               "revision-requested",

    # Moderation
    "content_flagged":                  "content-flagged",

    # Authentication
    "email_verification":               "email-verification",
    "password_reset":                   "password-reset",
    "account_deletion_otp":             "account-deletion-otp",
    "password_change_otp":              "password-change-otp",
}

CATEGORIES: List[Dict[str, str]] = [
    {"value": "application",    "label": "Application",    "description": "Application status updates"},
    {"value": "payment",        "label": "Payment",        "description": "Payment notifications"},
    {"value": "offer",          "label": "Offer",          "description": "Offer approvals and updates"},
    {"value": "company",        "label": "Company",        "description": "Company registration"},
    {"value": "system",         "label": "System",         "description": "System announcements"},
    {"value": "moderation",     "label": "Moderation",     "description": "Content moderation"},
    {"value": "authentication", "label": "Authentication", "description": "Login and security"},
]


def slug_for_notification_type(notification_type: str) -> Optional[str]:
    return NOTIFICATION_TYPE_SLUGS.get(notification_type)
