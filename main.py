#!/usr/bin/env python3
"""
Random Karma Similarity Dashboard - Main Entry Point

Live chart of Jaccard similarity over the target range, filled in as a
background sweep measures each target.

Usage:
    python main.py

Settings are read from the environment (or a .env file):
    LOG_LEVEL, DEFAULT_LAP_COUNT, DEFAULT_PLAYER_COUNT,
    TARGET_MIN_MS, TARGET_MAX_MS, GRAPH_BACKEND, FAILURE_RATE
"""
import sys
import os
import logging

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

# Configure logging FIRST - before any other imports
logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO),
    format='[%(levelname)s] %(name)s: %(message)s',
    stream=sys.stdout
)

from PyQt5 import QtWidgets

print("="*60)
print("🚀 SIMILARITY DASHBOARD STARTING...")
print("="*60)

from chart.gate import DEFAULT_BACKEND
from measurement import SyntheticMeasure
from ui.backend_loader import BackendLoader
from ui.main_window import MainWindow

print("✅ All core modules imported successfully")


def main():
    """Entry point for the similarity dashboard."""
    backend = os.getenv("GRAPH_BACKEND", DEFAULT_BACKEND)
    target_min = int(os.getenv("TARGET_MIN_MS", "0"))
    target_max = int(os.getenv("TARGET_MAX_MS", "300000"))
    lap_count = int(os.getenv("DEFAULT_LAP_COUNT", "25"))
    player_count = int(os.getenv("DEFAULT_PLAYER_COUNT", "32"))
    failure_rate = float(os.getenv("FAILURE_RATE", "0.05"))

    print(f"\n📋 Target range: {target_min} - {target_max} ms")
    print("🔧 Creating Qt application...")
    app = QtWidgets.QApplication(sys.argv)

    # Import the graphing backend in the background; the chart waits for it
    print(f"📈 Loading graphing backend {backend}...")
    loader = BackendLoader(backend)
    loader.failed.connect(lambda err: print(f"⚠️  Graphing backend unavailable: {err}"))
    loader.start()

    print("🖥️  Creating main window...")
    window = MainWindow(
        gate_probe=loader.probe,
        target_min=target_min,
        target_max=target_max,
        default_lap_count=lap_count,
        default_player_count=player_count,
        measure=SyntheticMeasure(target_min, target_max, failure_rate=failure_rate, delay_s=0.05),
    )

    print("🪟 Showing UI window...")
    window.show()
    window.start_run()

    print("\n" + "="*60)
    print("✅ DASHBOARD READY")
    print("="*60 + "\n")

    # Run Qt event loop
    result = app.exec_()

    # Clean shutdown
    print("\n🛑 Shutting down...")
    loader.wait()

    print("👋 Goodbye!")
    sys.exit(result)


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print("\n" + "="*60)
        print("❌ FATAL ERROR:")
        print("="*60)
        print(f"Error type: {type(e).__name__}")
        print(f"Error message: {e}")
        import traceback
        print("\nFull traceback:")
        traceback.print_exc()
        print("="*60)
        sys.exit(1)
