"""
PrepNotes Backend — Icon Resolver
===================================

What:  Maps note category folder names to display glyphs.
How:   Fixed lookup table; unknown names fall back to the generic folder glyph.
Who:   Used by the tree walker for every directory entry and by the folders
       endpoint for each top-level category.
"""

DEFAULT_FOLDER_ICON = "📁"
MARKDOWN_ICON = "📄"
JAVASCRIPT_ICON = "📜"

# Keys are exact (case-sensitive) folder names.
FOLDER_ICONS = {
    "Angular-Topics-Interview": "🅰️",
    "React": "⚛️",
    "Javascript": "📜",
    "Redux": "🔄",
    "Node-Express": "🟢",
    "CSS": "🎨",
    "MongoDB": "🍃",
    "Promise-Async-Await-Sequential-Execution": "⏳",
    "Event-Loop-Asynchronous-setTimeout": "🔄",
    "Fundamental-Algorithms-JS": "🧮",
    "Collection-of-Popular-Problems-with-Solutions": "💡",
    "Challenges-from-Popular-Coding-Practice-sites": "🏆",
    "Collection-of-TakeHome-Exercises": "📝",
    "Git-and-Github": "🌿",
    "system-design": "🏗️",
    "Web-Development-In-General": "🌐",
    "Collections-of-Questions-NOT-drafted-Ans": "❓",
    "GraphQL": "🔗",
    "Heroku": "☁️",
    "HTML": "📄",
    "Typscript": "📘",
    "webpack": "📦",
    "Common-Problem-Set": "🧩",
    "General-Soft_Getting_to_Know_Interview_Questions": "🗣️",
}


def icon_for(name: str) -> str:
    """Return the glyph for a folder name, or the generic folder glyph."""
    return FOLDER_ICONS.get(name, DEFAULT_FOLDER_ICON)
