"""Trend classification from moving averages.

- engine.py: short/long average + current value -> trend, signal, percentages
- dma.py: moving averages over a close-price series
"""
