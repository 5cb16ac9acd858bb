"""Allow running the tool as a module: python -m kubeai_doctor."""

from kubeai_doctor.cli.main import app

if __name__ == "__main__":
    app()
