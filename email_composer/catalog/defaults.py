"""
Table interne des compositions par défaut, une par slug de notification.

Format d'un bloc : (kind, content) ou (kind, content, properties).
Les contenus utilisent des placeholders, jamais des valeurs réelles.
"""
from ..blocks.definitions import DEFAULT_FOOTER

AUTOMATED_EMAIL_FOOTER = "This is an automated email from AffiliateXchange."

_GREETING = ("greeting", "Hi {{userName}},")
_FOOTER   = ("footer", DEFAULT_FOOTER)


def _button(label: str, color: str, url: str = "{{linkUrl}}") -> tuple:
    return ("button", label, {"url": url, "color": color})


def _amount(label: str, style: str, content: str = "{{amount}}") -> tuple:
    return ("amount-display", content, {"label": label, "style": style})


DEFAULT_COMPOSITIONS = [

    # ── Application ─────────────────────────────────────────────────────────
    {
        "slug": "application-status-change", "name": "Application Status Change", "category": "application",
        "header_title": "Application Update", "header_color": "#10B981",
        "subject": "Your application status has been updated",
        "blocks": [
            _GREETING,
            ("success-box", "Your application for {{offerTitle}} has been updated!"),
            ("text", "Please log in to view the details and next steps."),
            _button("View Application", "success"),
            _FOOTER,
        ],
    },
    {
        "slug": "new-application", "name": "New Application", "category": "application",
        "header_title": "New Application Received", "header_color": "#4F46E5",
        "subject": "New application for {{offerTitle}}",
        "blocks": [
            _GREETING,
            ("info-box", "You have received a new application for your offer: {{offerTitle}}"),
            ("text", "Please review the application and respond to the creator."),
            _button("Review Application", "primary"),
            _FOOTER,
        ],
    },

    # ── Payment ─────────────────────────────────────────────────────────────
    {
        "slug": "payment-received", "name": "Payment Received", "category": "payment",
        "header_title": "Payment Received!", "header_color": "#10B981",
        "subject": "Payment received: {{amount}}",
        "blocks": [
            _GREETING,
            ("success-box", "Great news! You have received a payment."),
            _amount("Amount Received", "success"),
            ("details-table",
             "Gross Amount:{{grossAmount}}\nPlatform Fee:{{platformFee}}\n"
             "Processing Fee:{{processingFee}}\nTransaction ID:{{transactionId}}"),
            _button("View Payment Details", "success"),
            _FOOTER,
        ],
    },
    {
        "slug": "payment-pending", "name": "Payment Pending", "category": "payment",
        "header_title": "Payment Pending Review", "header_color": "#F59E0B",
        "subject": "New payment ready for processing",
        "blocks": [
            _GREETING,
            ("warning-box", "A new affiliate payment is ready for processing and requires your review."),
            _amount("Payment Amount", "warning"),
            ("text", "Please review and process this payment at your earliest convenience."),
            _button("Review Payment", "warning"),
            _FOOTER,
        ],
    },
    {
        "slug": "payment-approved", "name": "Payment Approved", "category": "payment",
        "header_title": "Payment Sent Successfully", "header_color": "#10B981",
        "subject": "Payment sent: {{amount}}",
        "blocks": [
            _GREETING,
            ("success-box", "Your payment has been successfully sent!"),
            _amount("Amount Sent", "success"),
            ("text", "The payment has been processed and sent to the creator."),
            _button("View Details", "success"),
            _FOOTER,
        ],
    },
    {
        "slug": "payment-disputed", "name": "Payment Disputed", "category": "payment",
        "header_title": "Payment Dispute", "header_color": "#EF4444",
        "subject": "Payment dispute initiated",
        "blocks": [
            _GREETING,
            ("error-box", "A payment dispute has been initiated."),
            ("text", "Please review the dispute details and respond as soon as possible."),
            _button("View Dispute", "danger"),
            _FOOTER,
        ],
    },
    {
        "slug": "payment-dispute-resolved", "name": "Payment Dispute Resolved", "category": "payment",
        "header_title": "Dispute Resolved", "header_color": "#10B981",
        "subject": "Payment dispute resolved",
        "blocks": [
            _GREETING,
            ("success-box", "The payment dispute has been resolved."),
            ("text", "Please log in to view the resolution details."),
            _button("View Details", "success"),
            _FOOTER,
        ],
    },
    {
        "slug": "payment-refunded", "name": "Payment Refunded", "category": "payment",
        "header_title": "Payment Refunded", "header_color": "#3B82F6",
        "subject": "Payment has been refunded",
        "blocks": [
            _GREETING,
            ("info-box", "A payment refund has been processed."),
            _amount("Refunded Amount", "default"),
            _button("View Details", "primary"),
            _FOOTER,
        ],
    },
    {
        "slug": "payment-failed-insufficient-funds", "name": "Payment Failed (Insufficient Funds)",
        "category": "payment",
        "header_title": "Payment Processing Alert", "header_color": "#F59E0B",
        "subject": "Payment Processing Failed - Insufficient Funds",
        "blocks": [
            _GREETING,
            ("warning-box", "Your PayPal business account has insufficient funds to complete a payment."),
            _amount("Required Amount", "warning"),
            ("numbered-list",
             "Add funds to your PayPal business account\nWait for funds to become available\n"
             "Contact admin to retry the payment"),
            _button("View Payment Details", "warning"),
            _FOOTER,
        ],
    },

    # ── Offer ───────────────────────────────────────────────────────────────
    {
        "slug": "offer-approved", "name": "Offer Approved", "category": "offer",
        "header_title": "Offer Approved!", "header_color": "#10B981",
        "subject": 'Your offer "{{offerTitle}}" has been approved!',
        "blocks": [
            _GREETING,
            ("success-box",
             'Congratulations! Your offer "{{offerTitle}}" has been approved and is now live on the marketplace.'),
            ("text", "Creators can now discover and apply to your offer."),
            _button("View Your Offer", "success"),
            _FOOTER,
        ],
    },
    {
        "slug": "offer-rejected", "name": "Offer Rejected", "category": "offer",
        "header_title": "Offer Review Update", "header_color": "#6B7280",
        "subject": "Update on your offer submission",
        "blocks": [
            _GREETING,
            ("info-box", 'Your offer "{{offerTitle}}" requires some adjustments before it can be published.'),
            ("text", "Please review the feedback and make the necessary changes to resubmit your offer."),
            _button("View Offer", "gray"),
            _FOOTER,
        ],
    },
    {
        "slug": "priority-listing-expiring", "name": "Priority Listing Expiring", "category": "offer",
        "header_title": "Priority Listing Expiring", "header_color": "#F59E0B",
        "subject": "Priority listing expiring soon",
        "blocks": [
            _GREETING,
            ("warning-box",
             'Your priority listing for "{{offerTitle}}" will expire in {{daysUntilExpiration}} days.'),
            ("text", "Renew now to keep your offer at the top of search results and maintain maximum visibility."),
            _button("Renew Priority Listing", "warning"),
            _FOOTER,
        ],
    },
    {
        "slug": "work-completion-approval", "name": "Work Completion Approval", "category": "offer",
        "header_title": "Work Approved!", "header_color": "#10B981",
        "subject": "Work approved for {{offerTitle}}",
        "blocks": [
            _GREETING,
            ("success-box", 'Congratulations! Your work for "{{offerTitle}}" has been approved.'),
            _amount("Your Payment", "success"),
            ("text", "Your payment has been initiated and will be processed shortly."),
            _button("View Details", "success"),
            _FOOTER,
        ],
    },
    {
        "slug": "deliverable-rejected", "name": "Deliverable Rejected", "category": "offer",
        "header_title": "Deliverable Rejected", "header_color": "#EF4444",
        "subject": "Your deliverable requires changes",
        "blocks": [
            _GREETING,
            ("error-box", 'Your deliverable for "{{offerTitle}}" has been rejected and requires changes.'),
            ("text", "Please review the feedback and resubmit your work."),
            _button("View Feedback", "danger"),
            _FOOTER,
        ],
    },
    {
        "slug": "revision-requested", "name": "Revision Requested", "category": "offer",
        "header_title": "Revision Requested", "header_color": "#F59E0B",
        "subject": "Revision requested for your submission",
        "blocks": [
            _GREETING,
            ("warning-box", 'A revision has been requested for your submission on "{{offerTitle}}".'),
            ("text", "Please review the revision instructions and resubmit your work."),
            _button("View Instructions", "warning"),
            _FOOTER,
        ],
    },

    # ── Company ─────────────────────────────────────────────────────────────
    {
        "slug": "registration-approved", "name": "Registration Approved", "category": "company",
        "header_title": "Welcome to AffiliateXchange!", "header_color": "#4F46E5",
        "subject": "Your account has been approved!",
        "blocks": [
            _GREETING,
            ("success-box", "Great news! Your company account has been approved."),
            ("text", "You can now start creating offers and connecting with creators on our platform."),
            _button("Get Started", "primary"),
            _FOOTER,
        ],
    },
    {
        "slug": "registration-rejected", "name": "Registration Rejected", "category": "company",
        "header_title": "Account Registration Update", "header_color": "#6B7280",
        "subject": "Update on your registration",
        "blocks": [
            _GREETING,
            ("text",
             "Thank you for your interest in AffiliateXchange. Unfortunately, we are unable to approve "
             "your company account at this time."),
            ("info-box",
             "If you believe this is an error or would like more information, please contact our support team."),
            _button("Contact Support", "gray"),
            ("footer", "This is an automated notification from AffiliateXchange."),
        ],
    },

    # ── System ──────────────────────────────────────────────────────────────
    {
        "slug": "system-announcement", "name": "System Announcement", "category": "system",
        "header_title": "System Announcement", "header_color": "#4F46E5",
        "subject": "{{announcementTitle}}",
        "blocks": [
            _GREETING,
            ("heading", "{{announcementTitle}}", {"size": "medium"}),
            ("text", "{{announcementMessage}}"),
            _button("Learn More", "primary"),
            _FOOTER,
        ],
    },
    {
        "slug": "new-message", "name": "New Message", "category": "system",
        "header_title": "New Message", "header_color": "#4F46E5",
        "subject": "New message from {{companyName}}",
        "blocks": [
            _GREETING,
            ("text", "You have a new message from {{companyName}} regarding {{offerTitle}}."),
            ("info-box", '"{{messagePreview}}"'),
            _button("View Message", "primary"),
            _FOOTER,
        ],
    },
    {
        "slug": "review-received", "name": "Review Received", "category": "system",
        "header_title": "New Review Received", "header_color": "#4F46E5",
        "subject": "New review received ({{reviewRating}} stars)",
        "blocks": [
            _GREETING,
            ("text", "You have received a new review for your company!"),
            ("info-box", '{{reviewRating}} out of 5 stars\n\n"{{reviewText}}"'),
            _button("View Review", "primary"),
            _FOOTER,
        ],
    },

    # ── Moderation ──────────────────────────────────────────────────────────
    {
        "slug": "content-flagged", "name": "Content Flagged", "category": "moderation",
        "header_title": "Content Under Review", "header_color": "#F59E0B",
        "subject": "Your content is under review",
        "blocks": [
            _GREETING,
            ("warning-box", "Your content has been flagged for review by our moderation system."),
            ("text", "Our moderation team will review your content and you will be notified of the outcome."),
            ("info-box",
             "What happens next:\n- Our team will review your content\n"
             "- You will be notified once review is complete\n- If action is required, we will provide details"),
            _button("View Details", "warning"),
            _FOOTER,
        ],
    },

    # ── Authentication ──────────────────────────────────────────────────────
    {
        "slug": "email-verification", "name": "Email Verification", "category": "authentication",
        "header_title": "Verify Your Email", "header_color": "#4F46E5",
        "subject": "Verify your email address",
        "blocks": [
            _GREETING,
            ("text",
             "Thank you for registering with AffiliateXchange. Please verify your email address to "
             "complete your registration."),
            _button("Verify Email Address", "primary", url="{{verificationUrl}}"),
            ("warning-box", "This verification link will expire in 24 hours."),
            ("text", "If you did not create an account, you can safely ignore this email."),
            ("footer", AUTOMATED_EMAIL_FOOTER),
        ],
    },
    {
        "slug": "password-reset", "name": "Password Reset", "category": "authentication",
        "header_title": "Password Reset Request", "header_color": "#F59E0B",
        "subject": "Reset your password",
        "blocks": [
            _GREETING,
            ("text",
             "We received a request to reset your password. Click the button below to create a new password."),
            _button("Reset Password", "warning", url="{{resetUrl}}"),
            ("warning-box", "This link will expire in 1 hour."),
            ("text", "If you did not request a password reset, you can safely ignore this email."),
            ("footer", AUTOMATED_EMAIL_FOOTER),
        ],
    },
    {
        "slug": "account-deletion-otp", "name": "Account Deletion Code", "category": "authentication",
        "header_title": "Account Deletion Request", "header_color": "#EF4444",
        "subject": "Account Deletion Verification Code",
        "blocks": [
            _GREETING,
            ("text",
             "We received a request to delete your account. Use the verification code below to confirm:"),
            _amount("Verification Code", "warning", content="{{otpCode}}"),
            ("error-box",
             "Warning: Account deletion is permanent and cannot be undone. "
             "All your data will be permanently deleted."),
            ("text", "This code will expire in 15 minutes. If you did not request this, please ignore this email."),
            ("footer", AUTOMATED_EMAIL_FOOTER),
        ],
    },
    {
        "slug": "password-change-otp", "name": "Password Change Code", "category": "authentication",
        "header_title": "Password Change Request", "header_color": "#F59E0B",
        "subject": "Password Change Verification Code",
        "blocks": [
            _GREETING,
            ("text",
             "We received a request to change your password. Use the verification code below to confirm:"),
            _amount("Verification Code", "warning", content="{{otpCode}}"),
            ("warning-box", "This code will expire in 15 minutes. Do not share this code with anyone."),
            ("text", "If you did not request a password change, please secure your account immediately."),
            ("footer", AUTOMATED_EMAIL_FOOTER),
        ],
    },
]
