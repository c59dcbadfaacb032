"""
weightlifting — exercise-quality report for the Weight Lifting Exercises
accelerometer dataset (Random Forest on belt/arm/dumbbell/forearm sensors).
"""
