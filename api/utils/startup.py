"""Mensagens coloridas de início e parada do servidor"""

import logging
from datetime import datetime

from colorama import Fore, Style, init

init(autoreset=True)

ENDPOINTS = (
    ("POST", "/api/darfs/parse", "lê as guias de DARF de um PDF"),
    ("POST", "/api/remittance/generate", "gera o arquivo .rem CNAB 240"),
    ("GET", "/api/health", "status do serviço"),
)

LEVEL_COLORS = {"info": Fore.CYAN, "success": Fore.GREEN}


def print_startup_banner(config) -> None:
    rule = "=" * 66
    print(f"\n{Fore.CYAN}{rule}")
    print(f"{Fore.CYAN}  {config.APP_NAME} v{config.APP_VERSION} ({config.ENV})")
    print(f"{Fore.CYAN}{rule}\n")
    print(f"  Banco remetente:  {Fore.GREEN}{config.REMITTANCE_DEFAULT_BANK} {config.REMITTANCE_BANK_NAME}")
    print(f"  Limite do PDF:    {Fore.GREEN}{config.MAX_CONTENT_LENGTH // (1024 * 1024)} MB")
    print(f"  Endereço:         {Fore.BLUE}http://{config.HOST}:{config.PORT}\n")
    for method, path, description in ENDPOINTS:
        print(f"  {Fore.YELLOW}{method:<5}{Style.RESET_ALL} {path:<28} {description}")
    print()


def print_shutdown_message() -> None:
    print(f"\n{Fore.RED}[SHUTDOWN] Encerrando o servidor de remessas...\n")


def startup_message(message: str, level: str = "info") -> None:
    color = LEVEL_COLORS.get(level, Fore.CYAN)
    print(f"{color}[{datetime.now():%H:%M:%S}] [{level.upper()}]{Style.RESET_ALL} {message}")


def quiet_werkzeug() -> None:
    # o banner acima substitui o log de requisições do servidor de desenvolvimento
    logging.getLogger('werkzeug').setLevel(logging.ERROR)
