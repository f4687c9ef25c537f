"""Tests for timecalc.core"""
