"""기본 환경 설정."""

from __future__ import annotations

import logging
import os
from configparser import ConfigParser
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

from datamapper.core import DataMapperConfigError

ENV_LOG_LEVEL = "DATAMAPPER_LOG_LEVEL"
SETUPCFG_SECTION = "datamapper"


def load_setupcfg(path: Path) -> Optional[dict[str, str]]:
    if (path / "setup.cfg").exists():
        # 주어진 경로에 "setup.cfg" 파일이 있다면 [datamapper] 섹션을 읽습니다.
        config = ConfigParser()
        config.read(path / "setup.cfg")
        if SETUPCFG_SECTION in config:
            return dict(config[SETUPCFG_SECTION])
    return None


@dataclass
class DataMapperConfig:
    """DataMapper UoW 설정."""

    log_level: str = "INFO"
    logger_name: str = "datamapper.uow"

    def __post_init__(self):
        self.level  # 잘못된 레벨은 생성 시점에 실패시킵니다.

    @staticmethod
    def load(path: Path = Path(".")) -> DataMapperConfig:
        """`setup.cfg` 의 ``[datamapper]`` 섹션과 환경변수에서 설정을 로드합니다.

        우선순위는 환경변수(``DATAMAPPER_LOG_LEVEL``) > `setup.cfg` > 기본값 입니다.
        """
        kwargs: dict[str, str] = {}
        cfg = load_setupcfg(path)

        if cfg:
            known = {f.name for f in fields(DataMapperConfig)}
            unknown = set(cfg) - known
            if unknown:
                raise DataMapperConfigError(
                    f"unknown option(s) in [{SETUPCFG_SECTION}]: {sorted(unknown)}"
                )
            kwargs.update(cfg)

        if os.environ.get(ENV_LOG_LEVEL):
            kwargs["log_level"] = os.environ[ENV_LOG_LEVEL]

        return DataMapperConfig(**kwargs)

    @property
    def level(self) -> int:
        """``logging`` 모듈의 숫자 레벨."""
        level = logging.getLevelName(self.log_level.strip().upper())
        if not isinstance(level, int):
            raise DataMapperConfigError(f"invalid log level: {self.log_level!r}")
        return level
