### NAVIGATOR SETTINGS ###
DEFAULT_AVOID_DIST = 0.15  # extra clearance kept around every robot obstacle (m)
ENEMY_AVOID_DIST_SCALE = 1.0  # multiplier on the avoid distance for enemy robots
OBSTACLE_PREDICTION_TIME = 0.0  # how far ahead (s) obstacles are projected before planning
MAX_NAVIGATOR_WORKERS = 1  # >1 plans intents of one cycle on a thread pool

### RRT SETTINGS ###
RRT_MAX_ITERATIONS = 3000
RRT_STEP_SIZE = 0.15  # m
RRT_GOAL_BIAS = 0.2  # probability of sampling the goal directly
RRT_GOAL_TOLERANCE = 0.2  # when are we close enough to the goal to stop (m)
RRT_PROGRESS_LOG_INTERVAL = 250  # iterations between debug progress logs
