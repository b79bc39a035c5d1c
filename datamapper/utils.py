"""UoW 상태를 사람이 읽기 좋게 출력하기 위한 헬퍼."""
from typing import Iterable

from colorama import init as init_colors

init_colors()  # For Windows environment

from colorama import Fore, Style  # noqa

from datamapper.core import Category

CATEGORY_COLORS = {
    Category.NEW: Fore.GREEN,
    Category.DIRTY: Fore.YELLOW,
    Category.DELETED: Fore.RED,
}


def fg(text, color=Fore.WHITE):
    """텍스트를 지정된 ANSI 컬러로 출력합니다."""
    return f"{color}{text}{Fore.RESET}"


def bold(text, color=Fore.WHITE):
    """텍스트를 지정된 ANSI 컬러와 밝기 효과를 주어 출력합니다."""
    return f"{Style.BRIGHT}{color}{text}{Style.RESET_ALL}"


def format_category(category: Category, ids: Iterable[str]) -> list[str]:
    """카테고리 헤더와 등록된 ID 목록을 컬러 텍스트 라인들로 만듭니다.

    Example: ::

        <new>
          '5'
          '7'
    """
    color = CATEGORY_COLORS[category]
    lines = [bold(f"  <{category}>", color)]
    lines += [fg(f"    {id!r}", color) for id in ids]
    return lines
