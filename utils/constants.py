"""
utils/constants.py

Purpose: Centralized static content

- All user-facing messages shown by the front end
- Screen labels and menu entries
- Identifier prefixes and alphabets used by the mock backend

(Prevents hardcoding across the codebase)
"""

import string

# ============================================================
# IDENTIFIERS
# ============================================================

PAYMENT_REF_PREFIX = "ZMTAX-"
REGISTRATION_PREFIX = "PACRA-"
ID_APPLICATION_PREFIX = "IDAPP-"
CASE_PREFIX = "CASE-"

PAYMENT_REF_LENGTH = 8
CASE_ID_LENGTH = 7

# URL-safe alphabet, same characters nanoid draws from
URL_SAFE_ALPHABET = string.ascii_letters + string.digits + "_-"
CASE_ID_ALPHABET = string.ascii_uppercase + string.digits

REGISTRATION_NUMBER_MIN = 10000
REGISTRATION_NUMBER_MAX = 99999

STATUS_OK = "OK"

# ============================================================
# API ERRORS
# ============================================================

ERROR_PHONE_REQUIRED = "Phone required"
ERROR_NOT_AUTHENTICATED = "Not authenticated"

# ============================================================
# FRONT END
# ============================================================

APP_TITLE = "SmartGov Zambia"
APP_FOOTER = "SmartGov Zambia • Prototype"

LOGIN_PROMPT = "Enter your phone number to sign in."
LOGIN_PHONE_MISSING = "Please enter your phone number."
LOGIN_SUCCESS = "Welcome, {name}!"
LOGOUT_MESSAGE = "You have been signed out."

TAX_TYPES = ["income", "paye", "vat", "turnover", "property"]

PAYMENT_SUCCESS = "Payment received. Reference: {ref} ({amount} {tax_type})"
PAYMENT_AMOUNT_MISSING = "Please enter an amount to pay."
REGISTRATION_SUCCESS = "Business registered. Registration number: {reg_no}"
ID_APPLICATION_SUCCESS = "ID application submitted. Application ID: {app_id}"
REPORT_SUCCESS = "Report submitted. Case ID: {case_id}"
ACTION_FAILED = "Request failed: {error}"

# ============================================================
# DOCUMENTS
# ============================================================

# Static wallet shown on the documents screen
CITIZEN_DOCUMENTS = [
    {"title": "National Registration Card", "kind": "nrc"},
    {"title": "TPIN Certificate", "kind": "tpin"},
    {"title": "Tax Clearance Certificate", "kind": "tax_clearance"},
]
