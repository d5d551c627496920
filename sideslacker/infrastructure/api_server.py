from __future__ import annotations

from dataclasses import dataclass

import uvicorn
from fastapi import FastAPI


@dataclass
class ApiServer:
    app: FastAPI
    host: str
    port: int
    log_level: str = "info"

    def run(self) -> None:
        config = uvicorn.Config(self.app, host=self.host, port=self.port, log_level=self.log_level)
        uvicorn.Server(config).run()
