"""Headless image canvas, render queue, pixel utilities, error numbers and XPM42 reading."""