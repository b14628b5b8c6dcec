"""
Framework-wide constants: settings file, engine environment variables,
wait defaults and report names.
"""

# Settings
APP_SETTINGS = "appsettings.json"
APP_SETTINGS_ENV_VAR = "APPSETTINGS_PATH"
TEST_USER_EMAIL_KEY = "TestUserEmail"
TEST_USER_PASSWORD_KEY = "TestUserPassword"

# Engine driver locations (each optional)
IE_WEBDRIVER_ENV_VAR = "IeWebDriver"
CHROME_WEBDRIVER_ENV_VAR = "ChromeWebDriver"
FIREFOX_WEBDRIVER_ENV_VAR = "GeckoWebDriver"
EDGE_WEBDRIVER_ENV_VAR = "EdgeWebDriver"

# Driver executables looked up inside a driver directory
CHROME_WEBDRIVER_EXE = "chromedriver"
FIREFOX_WEBDRIVER_EXE = "geckodriver"
EDGE_WEBDRIVER_EXE = "msedgedriver"
IE_WEBDRIVER_EXE = "IEDriverServer"

# Explicit waits (seconds)
DEFAULT_WAIT_TIMEOUT = 10.0
DEFAULT_POLL_FREQUENCY = 0.5

# Diagnostics
SCREENSHOT_DIR_NAME = "screenshots"
SCREENSHOT_ATTACHMENT_NAME = "Failure Screenshot"

# Pages
MICROSOFT_LOGIN_URL = "https://login.microsoftonline.com"
