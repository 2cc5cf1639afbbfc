from __future__ import annotations

from artvote_forms.colors import ACCENT, BOLD, INFO, MUTED, RESET, SUCCESS, WARNING
from artvote_forms.google_client import SCOPES, load_credentials
from artvote_forms.paths import AppPaths

CREDENTIALS_HELP_URL = "https://console.cloud.google.com/apis/credentials"
REQUIRED_APIS = ("drive.googleapis.com", "sheets.googleapis.com", "forms.googleapis.com")


def _print_header(title: str) -> None:
    print(f"{BOLD}{ACCENT}{title}{RESET}")
    print(f"{MUTED}{'-' * len(title)}{RESET}")


def run_auth(paths: AppPaths) -> None:
    _print_header("Artvote Setup — Google Sign-in")

    if not paths.credentials_file.exists():
        setup_steps = [
            f"Open {ACCENT}{CREDENTIALS_HELP_URL}{RESET}",
            "Create an OAuth client ID of type 'Desktop app'",
            f"Download the JSON and save it as {ACCENT}{paths.credentials_file}{RESET}",
            "Enable " + ", ".join(f"{ACCENT}{api}{RESET}" for api in REQUIRED_APIS),
        ]
        print(f"{WARNING}No OAuth client file found.{RESET}")
        for idx, step in enumerate(setup_steps, start=1):
            print(f"  {MUTED}{idx}.{RESET} {step}")
        print()

    if paths.token_file.exists():
        print(
            f"{INFO}Reusing cached token{RESET} {ACCENT}{paths.token_file}{RESET} "
            f"{MUTED}(delete it to sign in again){RESET}"
        )

    load_credentials(paths)

    print(f"\n{SUCCESS}Signed in.{RESET} Scopes: {', '.join(SCOPES)}")
    print(
        f"\n{INFO}Next step:{RESET}\n"
        f"  {ACCENT}artvote build <pokemon> <contest number> <category> [...]{RESET}"
    )
