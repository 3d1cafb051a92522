#!/usr/bin/env python3
"""
MedSim — Запуск sandbox API сервера

Запуск:
    python scripts/run_api.py
    python scripts/run_api.py --port 8080
    python scripts/run_api.py --host 127.0.0.1 --port 8000
"""

import argparse
import logging

import uvicorn

from med_sim.config import SandboxConfig


def main():
    defaults = SandboxConfig.from_env()

    parser = argparse.ArgumentParser(description='MedSim Sandbox API Server')
    parser.add_argument('--host', default=defaults.host, help=f'Host (default: {defaults.host})')
    parser.add_argument('--port', type=int, default=defaults.port, help=f'Port (default: {defaults.port})')
    parser.add_argument('--reload', action='store_true', help='Enable auto-reload')
    parser.add_argument('--log-level', default='info', help='Log level (default: info)')

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("=" * 60)
    print("🏥 MedSim — Sandbox API Server")
    print("=" * 60)
    print(f"   Host: {args.host}")
    print(f"   Port: {args.port}")
    print(f"   Reload: {args.reload}")
    print("=" * 60)

    # Запускаємо сервер
    uvicorn.run(
        "med_sim.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
