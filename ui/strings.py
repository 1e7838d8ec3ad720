"""User-facing strings for the settings screens."""

SETTINGS = "Settings"
DONE = "Done"
CANCEL = "Cancel"

# General
GENERAL_SECTION_TITLE = "General"
DEFAULT_SEARCH_ENGINE = "Default Search Engine"
SAVE_LOGINS = "Save Logins"
BLOCK_POPUPS = "Block Pop-ups"
SHOW_TABS_BAR = "Show Tabs Bar"
PASSWORD_MANAGER_BUTTON = "Password Manager Button"
PASSWORD_MANAGER_BUTTON_FOOTER = (
    "Choose which password manager the key icon in the URL bar opens. "
    "\"Show picker\" lets you choose each time."
)

# Privacy
PRIVACY = "Privacy"
CLEAR_PRIVATE_DATA = "Clear Private Data"
COOKIE_CONTROL = "Cookie Control"
PRIVATE_BROWSING_ONLY = "Private Browsing Only"
BROWSING_HISTORY = "Browsing History"
CACHE = "Cache"
COOKIES_AND_SITE_DATA = "Cookies and Site Data"
SAVED_LOGINS = "Saved Logins"
CLEAR_PRIVATE_DATA_FOOTER = "Selected data is removed from this device."

# Security
SECURITY = "Security"
PASSCODE = "Passcode"
TOUCH_ID_PASSCODE = "Touch ID & Passcode"
FACE_ID_PASSCODE = "Face ID & Passcode"
REQUIRE_PASSCODE = "Require Passcode"
REQUIRE_PASSCODE_FOOTER = "Ask for your passcode each time the browser opens."

# Shields
SHIELD_DEFAULTS = "Brave Shield Defaults"
BLOCK_ADS_AND_TRACKING = "Block Ads & Tracking"
HTTPS_EVERYWHERE = "HTTPS Everywhere"
BLOCK_PHISHING_AND_MALWARE = "Block Phishing and Malware"
BLOCK_SCRIPTS = "Block Scripts"
FINGERPRINTING_PROTECTION = "Fingerprinting Protection"

# Support
SUPPORT = "Support"
REPORT_A_BUG = "Report a bug"
PRIVACY_POLICY = "Privacy Policy"
TERMS_OF_USE = "Terms of Use"
OPEN_IN_BROWSER = "Open in Browser"

# About
ABOUT = "About"
VERSION_TEMPLATE = "Version {} ({})"
DEVICE_TEMPLATE = "Device {} {}"
COPY_APP_INFO_TO_CLIPBOARD = "Copy app info to clipboard"
