"""
grainview: grain partitions of audio tracks for waveform track views.
"""
