ROBOT_RADIUS = 0.09  # meters (SSL standard)
