"""Run with: python -m circlecurves"""
from circlecurves.main import main

main()
