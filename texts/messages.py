"""All user-facing strings, ja/en."""

LANGUAGES = ("ja", "en")

TRANSLATIONS: dict[str, dict[str, str]] = {
    "ja": {
        "command.show-moon-age":        "月齢を表示",
        "command.status":               "ステータスを表示",
        "status.day-unit":              "日",
        "command.settings":             "設定",
        "welcome":                      "🌙 *月齢ボット*\n\n今日の月齢・照度・次の新月と満月をお知らせします。",
        "menu.moon":                    "🌙 月齢",
        "menu.status":                  "📊 ステータス",
        "menu.settings":                "⚙️ 設定",
        "menu.back":                    "◀️ 戻る",
        "settings.title":               "⚙️ *月齢ボット設定*",
        "settings.show-status-bar":     "ステータスを表示",
        "settings.show-status-bar-desc": "毎日ステータスと新月・満月のお知らせを送ります",
        "settings.show-percentage":     "パーセンテージを表示",
        "settings.show-percentage-desc": "ステータスに照度パーセンテージを表示します",
        "settings.timezone":            "タイムゾーン",
        "settings.timezone-desc":       "タイムゾーンを選択してください",
        "settings.language":            "言語",
        "settings.language-auto":       "自動",
        "settings.saved":               "保存しました",
        "settings.on":                  "オン",
        "settings.off":                 "オフ",
        "modal.title":                  "月齢情報",
        "modal.age":                    "月齢",
        "modal.days":                   "日",
        "modal.illumination":           "照度",
        "modal.next-new-moon":          "次の新月",
        "modal.next-full-moon":         "次の満月",
        "modal.hemisphere":             "半球",
        "modal.hemisphere-north":       "北半球",
        "modal.hemisphere-south":       "南半球",
        "reminder.new-moon":            "🌑 *まもなく新月です*",
        "reminder.full-moon":           "🌕 *まもなく満月です*",
        "view.name":                    "月齢",
        "timezone.system-default":      "システムデフォルト",
        "admin.not-admin":              "このコマンドは管理者専用です。",
    },
    "en": {
        "command.show-moon-age":        "Show moon age",
        "command.status":               "Show status",
        "status.day-unit":              "d",
        "command.settings":             "Settings",
        "welcome":                      "🌙 *Moon Age Bot*\n\nToday's moon age, illumination and the next new and full moons.",
        "menu.moon":                    "🌙 Moon age",
        "menu.status":                  "📊 Status",
        "menu.settings":                "⚙️ Settings",
        "menu.back":                    "◀️ Back",
        "settings.title":               "⚙️ *Moon Phase Settings*",
        "settings.show-status-bar":     "Show status",
        "settings.show-status-bar-desc": "Send a daily status and new/full moon notices",
        "settings.show-percentage":     "Show percentage",
        "settings.show-percentage-desc": "Display illumination percentage in the status",
        "settings.timezone":            "Timezone",
        "settings.timezone-desc":       "Select your timezone",
        "settings.language":            "Language",
        "settings.language-auto":       "Auto",
        "settings.saved":               "Saved",
        "settings.on":                  "on",
        "settings.off":                 "off",
        "modal.title":                  "Moon Age Information",
        "modal.age":                    "Age",
        "modal.days":                   "days",
        "modal.illumination":           "Illumination",
        "modal.next-new-moon":          "Next New Moon",
        "modal.next-full-moon":         "Next Full Moon",
        "modal.hemisphere":             "Hemisphere",
        "modal.hemisphere-north":       "Northern Hemisphere",
        "modal.hemisphere-south":       "Southern Hemisphere",
        "reminder.new-moon":            "🌑 *New moon is coming*",
        "reminder.full-moon":           "🌕 *Full moon is coming*",
        "view.name":                    "Moon Age",
        "timezone.system-default":      "System Default",
        "admin.not-admin":              "This command is for the admin only.",
    },
}

ADMIN_STATS_TEMPLATE = (
    "📊 *Stats*\n\n"
    "Users: *{total_users}*\n"
    "Status enabled: *{status_enabled}*\n"
    "Japanese: *{lang_ja}* · English: *{lang_en}* · Auto: *{lang_auto}*"
)


def t(key: str, lang: str = "en") -> str:
    """Translated text for ``key``; falls back to English, then to the key itself."""
    table = TRANSLATIONS.get(lang, TRANSLATIONS["en"])
    return table.get(key) or TRANSLATIONS["en"].get(key, key)
