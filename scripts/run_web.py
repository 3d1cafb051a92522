#!/usr/bin/env python3
"""
MedSim — Запуск Web UI (Streamlit)

Запуск:
    python scripts/run_web.py
    python scripts/run_web.py --port 8501 --backend http://localhost:8000

Примітка:
    Перед запуском Web UI переконайтесь, що backend працює:
    python scripts/run_api.py
"""

import os
import sys
import subprocess
import argparse
from pathlib import Path

# Шлях до проекту
project_root = Path(__file__).parent.parent
web_ui_path = project_root / "med_sim" / "web_ui" / "app.py"


def main():
    parser = argparse.ArgumentParser(description='MedSim Web UI')
    parser.add_argument('--port', type=int, default=8501, help='Port (default: 8501)')
    parser.add_argument('--host', default='localhost', help='Host (default: localhost)')
    parser.add_argument('--backend', default=None, help='Backend URL (MEDSIM_BACKEND_URL)')

    args = parser.parse_args()

    env = dict(os.environ)
    if args.backend:
        env["MEDSIM_BACKEND_URL"] = args.backend

    print("=" * 60)
    print("🏥 MedSim — Web UI (Streamlit)")
    print("=" * 60)
    print(f"   App: {web_ui_path}")
    print(f"   URL: http://{args.host}:{args.port}")
    print(f"   Backend: {env.get('MEDSIM_BACKEND_URL', 'http://localhost:8000')}")
    print("=" * 60)
    print()
    print("⚠️  Переконайтесь, що backend запущено:")
    print("    python scripts/run_api.py")
    print()

    # Перевіряємо чи існує файл
    if not web_ui_path.exists():
        print(f"❌ Файл не знайдено: {web_ui_path}")
        sys.exit(1)

    print("🚀 Запуск Streamlit...")
    print()

    # Запускаємо Streamlit
    cmd = [
        sys.executable, "-m", "streamlit", "run",
        str(web_ui_path),
        "--server.port", str(args.port),
        "--server.address", args.host,
        "--browser.gatherUsageStats", "false",
    ]

    try:
        subprocess.run(cmd, env=env)
    except KeyboardInterrupt:
        print("\n🛑 Зупинено")


if __name__ == "__main__":
    main()
