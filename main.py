import logging
import os
import sys
import time

import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.markdown import Markdown
from rich.prompt import Prompt
from rich.table import Table
from rich.theme import Theme

# Import Lexicon Components
from lexicon.analyzer import CommandAnalyzer
from lexicon.errors import CatalogError
from lexicon.loader import load_catalog, load_config, save_config, DEFAULT_CATALOG_ID, CATALOG_BASE_PATH

# 1. SETUP THEME
custom_theme = Theme({
    "info": "bold #b0d8e3",       # Pale Cyan
    "text": "default",            # Adaptive
    "dim": "dim",                 # Grey
    "warning": "bold #ffafaf",    # Soft red
    "success": "bold #a3be8c",    # Soft green
})

console = Console(theme=custom_theme)


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def setup_logging(config):
    level = str(config.get('log_level', 'WARNING')).upper()
    if not isinstance(logging.getLevelName(level), int):
        console.print(f"[warning]Unknown log level '{level}', using WARNING.[/]")
        level = "WARNING"
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def show_welcome_screen(config):
    clear_screen()

    welcome_md = Markdown("""
    # LORE-LEXICON

    Grammar templates in, understood commands out.

    > *put soccer ball in large wooden box*
    """)

    console.print(Panel(
        welcome_md,
        border_style="info",
        padding=(1, 2),
        width=60
    ))

    console.print("\n[dim]Select an option:[/dim]\n")

    debug_state = "On" if config.get('debug_mode', False) else "Off"
    menu_options = [
        ("1", f"Analyze Commands: {config.get('catalog_id', DEFAULT_CATALOG_ID)}"),
        ("2", "Show Vocabulary"),
        ("D", f"Toggle Debug Mode (current: {debug_state})"),
        ("3", "Quit")
    ]

    for key, label in menu_options:
        console.print(f" [[info]{key}[/info]] {label}")

    print()
    choice = Prompt.ask(" >", choices=["1", "2", "3", "D", "d"], default="1")
    return choice


def open_catalog(config):
    """
    Loads the configured catalog and builds the analyzer.
    Returns (catalog, analyzer) or None after reporting the problem.
    """
    catalog_id = config.get('catalog_id', DEFAULT_CATALOG_ID)
    base_path = config.get('catalog_path', CATALOG_BASE_PATH)

    try:
        catalog = load_catalog(catalog_id, base_path, strict_kinds=config.get('strict_kinds', False))
    except FileNotFoundError as e:
        console.print(Panel(f"[warning]ERROR: Catalog data not found.[/] Missing file: {e}", border_style="warning"))
        time.sleep(3)
        return None
    except yaml.YAMLError as e:
        console.print(Panel(f"[warning]YAML STRUCTURE ERROR:[/]\nCheck your catalog files for indentation or syntax errors.\nDetails: {e}", border_style="warning"))
        time.sleep(5)
        return None
    except CatalogError as e:
        console.print(Panel(f"[warning]CATALOG ERROR:[/]\n{e}", border_style="warning"))
        time.sleep(5)
        return None

    return catalog, CommandAnalyzer(catalog.world, catalog.grammar)


# ============================================
# RENDERING
# ============================================
def render_match(command, match):
    """Builds the panel shown for one analyzed command."""
    if match is None:
        return Panel(f"I didn't understand '{command}'.", title="No Match", border_style="warning")

    lines = [f"[bold]Template:[/] {match.template.text}", f"[bold]Action:[/] {match.action}"]
    for binding in match.bindings:
        names = ", ".join(o.description for o in binding.candidates)
        lines.append(f"[bold]{{{binding.kind}}}:[/] '{binding.text}' -> {names}")
    if match.is_ambiguous:
        lines.append("[dim]More than one object fits; the game will have to ask which.[/dim]")

    return Panel("\n".join(lines), title="Understood", border_style="success")


def render_vocabulary(analyzer):
    table = Table(title="Vocabulary", border_style="info", show_lines=True)
    table.add_column("Table", style="info", no_wrap=True)
    table.add_column("Words")
    for name, words in analyzer.vocabulary.as_dict().items():
        table.add_row(name, ", ".join(words) if words else "[dim](none)[/dim]")
    return table


# ============================================
# ANALYZER LOOP
# ============================================
def start_session(config):
    clear_screen()
    console.print(Panel("[info]LOADING CATALOG...[/info]", border_style="info"))

    opened = open_catalog(config)
    if opened is None:
        return
    catalog, analyzer = opened

    console.print(Panel(
        f"[bold blue]{catalog.title}[/bold blue]",
        title="CATALOG LOADED",
        border_style="info"
    ))
    console.print(f"[dim]Verbs: {', '.join(analyzer.vocabulary.verbs)}[/dim]")
    console.print("[dim]Type 'quit' to return to menu.[/dim]\n")

    is_debug = config.get('debug_mode', False)
    while True:
        user_input = Prompt.ask("[info]>[/info]").lower().strip()
        if not user_input:
            continue
        if user_input in ["quit", "exit", "menu"]:
            break

        if is_debug:
            candidates = [t.text for t in analyzer.candidate_templates(user_input)]
            console.print(Panel(
                "\n".join(candidates) if candidates else "(none)",
                title="[DEBUG: Candidate Templates]",
                border_style="dim"
            ))

        console.print(render_match(user_input, analyzer.analyze(user_input)))


def show_vocabulary(config):
    opened = open_catalog(config)
    if opened is None:
        return
    _, analyzer = opened
    console.print(render_vocabulary(analyzer))
    Prompt.ask("[dim]Press Enter to return to menu[/dim]", default="")


# ============================================
# MAIN
# ============================================
def main():
    def toggle_debug(current_config):
        """Toggles the debug_mode flag in config.yaml."""
        current_config['debug_mode'] = not current_config.get('debug_mode', False)
        save_config(current_config)
        clear_screen()
        console.print(Panel(
            f"[info]DEBUG MODE:[/][bold]{' ON' if current_config['debug_mode'] else ' OFF'}[/bold]",
            border_style="info"
        ))
        time.sleep(1)

    while True:
        # Re-load config to get the latest debug state for the menu label
        config = load_config()
        setup_logging(config)
        choice = show_welcome_screen(config)

        if choice == "1":
            start_session(config)
        elif choice.upper() == "D":
            toggle_debug(config)
        elif choice == "2":
            show_vocabulary(config)
        elif choice == "3":
            console.print("\nGoodbye.")
            sys.exit()


if __name__ == "__main__":
    main()
