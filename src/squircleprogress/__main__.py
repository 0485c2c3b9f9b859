"""Run the demo window: python -m squircleprogress"""
from squircleprogress.main import main

main()
