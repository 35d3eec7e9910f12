import os
import subprocess
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def test_dividend_model_no_streamlit():
    """Ensure the model and formatting layers import without streamlit installed."""
    result = subprocess.run(
        [sys.executable, "-c",
         "import sys; sys.modules['streamlit']=None; "
         "import core.dividend, core.formatting, config.constants, config.scenarios"],
        capture_output=True,
        cwd=ROOT,
    )
    assert result.returncode == 0, f"Model import failed: {result.stderr.decode()}"
