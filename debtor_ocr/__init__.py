"""Public debtor list OCR analysis.

Renders the pages of a scanned debtor report, runs Tesseract OCR on them,
pulls the debt amounts out of the recognized text and summarizes their
distribution with a histogram.
"""
