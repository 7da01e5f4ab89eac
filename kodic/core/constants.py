"""Shared constants across the application"""


class DictionaryConstants:
    """Constants for the Naver English-Korean dictionary API"""

    ROOT_URL = "https://en.dict.naver.com/api3/enko/"

    # Quotes around the values are part of the query the endpoint expects
    SEARCH_PATH_TEMPLATE = 'search?m="pc"&query="{term}"'

    DEFAULT_HEADERS = {
        "Accept": "application/json, text/plain, */*",
        "Accept-Language": "en-US,en;q=0.9,ko;q=0.8",
        "Referer": "https://en.dict.naver.com/",
    }


class TextConstants:
    """Constants for text validation and cleaning"""

    # A lookup term is one English word, ASCII letters only
    VALID_WORD_PATTERN = r"^[a-zA-Z]+$"

    WHITESPACE_PATTERN = r"\s+"

    # Applied in this order to every definition fragment
    SPAN_TAG_PATTERN = r"</?span[^>]*>"
    STRONG_TAG_PATTERN = r"</?strong[^>]*>"
    ARROW_NOTE_PATTERN = r"\(→(.*?)\)"
    EQUAL_NOTE_PATTERN = r"\(=(.*?)\)"
    BIARROW_NOTE_PATTERN = r"\(↔(.*?)\)"
    ABBR_MARKER_PATTERN = r"\(Abbr\.\)"


class CacheConstants:
    """Constants for the definition store"""

    CREATE_TABLE_SQL = """
        CREATE TABLE IF NOT EXISTS entries (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            term TEXT NOT NULL UNIQUE,
            definition TEXT NOT NULL,
            created_at TEXT NOT NULL,
            reviewed INTEGER NOT NULL DEFAULT 0
        )
    """
    CREATE_INDEX_SQL = (
        "CREATE INDEX IF NOT EXISTS idx_entries_created_at ON entries(created_at)"
    )

    DEFAULT_HISTORY_LIMIT = 20


class NotificationConstants:
    """Constants for desktop notifications"""

    NOTIFY_COMMAND = "notify-send"
    OSASCRIPT_COMMAND = "osascript"
    POWERSHELL_COMMAND = "powershell"

    # Windows only shows toasts for a registered app id; borrow PowerShell's
    POWERSHELL_APP_ID = (
        "{1AC14E77-02E7-4E5D-B744-2EB1AE5198B7}\\WindowsPowerShell\\v1.0\\powershell.exe"
    )
    TOAST_SCRIPT = (
        "[Windows.UI.Notifications.ToastNotificationManager, Windows.UI.Notifications, "
        "ContentType = WindowsRuntime] > $null; "
        "$t = [Windows.UI.Notifications.ToastNotificationManager]::GetTemplateContent("
        "[Windows.UI.Notifications.ToastTemplateType]::ToastText02); "
        "$x = $t.GetElementsByTagName('text'); "
        "$x.Item(0).AppendChild($t.CreateTextNode('{title}')) > $null; "
        "$x.Item(1).AppendChild($t.CreateTextNode('{body}')) > $null; "
        "[Windows.UI.Notifications.ToastNotificationManager]::CreateToastNotifier("
        "'{app_id}').Show([Windows.UI.Notifications.ToastNotification]::new($t))"
    )
