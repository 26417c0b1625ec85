import tkinter as tk
from tkinter import ttk


# Visual theme of the quote form: dark background with orange accents,
# matching the colors used in the generated PDF.


PALETTE = {
    "bg_app": "#0a0a0a",
    "bg_card": "#111111",
    "bg_input": "#1a1a1a",
    "text_primary": "#ffffff",
    "text_secondary": "#9ca3af",
    "text_muted": "#6b7280",
    "accent": "#f97316",
    "accent_active": "#ea580c",
    "success": "#4ade80",
    "border": "#1f2937",
    "focus": "#f97316",
}


FONTS = {
    "base": ("Segoe UI", 10),
    "base_bold": ("Segoe UI", 10, "bold"),
    "title": ("Segoe UI", 18, "bold"),
    "subtitle": ("Segoe UI", 12, "bold"),
    "total": ("Segoe UI", 14, "bold"),
    "button": ("Segoe UI", 12, "bold"),
}


def apply_theme(root: tk.Misc) -> None:
    """Apply the dark/orange ttk styles to the application.

    Safe to call once at startup; styling failures never stop the form.
    """
    try:
        style = ttk.Style(master=root)
        try:
            style.theme_use("clam")
        except Exception:
            for candidate in ("alt", "default", "classic"):
                try:
                    style.theme_use(candidate)
                    break
                except Exception:
                    continue

        root.configure(bg=PALETTE["bg_app"])
        root.option_add("*Font", FONTS["base"])

        style.configure(
            "TLabel",
            background=PALETTE["bg_card"],
            foreground=PALETTE["text_secondary"],
        )
        style.configure(
            "Total.TLabel",
            background=PALETTE["bg_card"],
            foreground=PALETTE["accent"],
            font=FONTS["total"],
        )
        style.configure(
            "Frete.TLabel",
            background=PALETTE["bg_card"],
            foreground=PALETTE["success"],
            font=FONTS["base_bold"],
        )
        style.configure(
            "TFrame",
            background=PALETTE["bg_app"],
        )
        style.configure(
            "Card.TFrame",
            background=PALETTE["bg_card"],
            bordercolor=PALETTE["border"],
            relief="flat",
        )
        style.configure(
            "TCheckbutton",
            background=PALETTE["bg_card"],
            foreground=PALETTE["text_secondary"],
            indicatorcolor=PALETTE["bg_input"],
        )
        style.map(
            "TCheckbutton",
            indicatorcolor=[("selected", PALETTE["accent"])],
            background=[("active", PALETTE["bg_card"])],
        )

        style.configure(
            "Primary.TButton",
            background=PALETTE["accent"],
            foreground="#ffffff",
            bordercolor=PALETTE["accent"],
            focusthickness=2,
            focuscolor=PALETTE["focus"],
            padding=(18, 12),
            font=FONTS["button"],
        )
        style.map(
            "Primary.TButton",
            background=[("active", PALETTE["accent_active"]), ("disabled", "#9a4a14")],
            relief=[("pressed", "sunken"), ("!pressed", "flat")],
        )

        style.configure(
            "TEntry",
            fieldbackground=PALETTE["bg_input"],
            foreground=PALETTE["text_primary"],
            insertcolor=PALETTE["text_primary"],
            bordercolor=PALETTE["border"],
            lightcolor=PALETTE["focus"],
            darkcolor=PALETTE["border"],
            padding=(8, 6),
        )
        style.map(
            "TEntry",
            fieldbackground=[("readonly", PALETTE["bg_input"])],
            foreground=[("readonly", PALETTE["text_secondary"])],
        )
        try:
            style.configure(
                "TCombobox",
                fieldbackground=PALETTE["bg_input"],
                background=PALETTE["bg_input"],
                foreground=PALETTE["text_primary"],
                arrowcolor=PALETTE["text_secondary"],
                bordercolor=PALETTE["border"],
                lightcolor=PALETTE["focus"],
                darkcolor=PALETTE["border"],
                padding=(6, 4),
            )
            style.map(
                "TCombobox",
                fieldbackground=[("readonly", PALETTE["bg_input"])],
                foreground=[("readonly", PALETTE["text_primary"])],
                bordercolor=[("focus", PALETTE["focus"])],
            )
        except Exception:
            pass
    except Exception:
        # Fail-safe: never break the app if styling fails
        pass


def card(frame: tk.Misc) -> None:
    try:
        frame.configure(bg=PALETTE["bg_card"])
    except Exception:
        pass
