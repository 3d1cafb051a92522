"""
MedSim — Web UI Module

Streamlit веб-інтерфейс симуляції клінічних випадків.

Запуск:
    streamlit run med_sim/web_ui/app.py

    або:

    python scripts/run_web.py

Вимоги:
    - Streamlit >= 1.31
    - Backend (справжній або sandbox: python scripts/run_api.py)
    - MEDSIM_BACKEND_URL, якщо backend не на localhost:8000
"""
