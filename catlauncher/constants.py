from __future__ import annotations

# ==============================================================================
# Kinematics
# ==============================================================================

# Below this speed on both axes the projectile is considered at rest.
REST_SPEED_THRESHOLD = 0.1

# Rotation only follows the velocity direction above this speed (avoids jitter).
ROTATION_SPEED_THRESHOLD = 0.1

# A post-bounce |vy| at or below this is a landing/slide rather than a bounce.
BOUNCE_MIN_VY = 1.0

# Extra friction multiplier applied while sliding (on top of ground friction).
SLIDE_FRICTION_MULT = 0.9

# ==============================================================================
# Launcher & Projectile Spawn
# ==============================================================================

# The projectile starts this far above the launcher base.
PROJECTILE_SPAWN_OFFSET_Y = 15.0

# Barrel pivot sits above the launcher base; aim angles are measured from it.
BARREL_PIVOT_OFFSET_Y = 10.0

# ==============================================================================
# Obstacle Generation
# ==============================================================================

# First spawn cursor, as a fraction of viewport width (start a bit ahead).
FIRST_OBSTACLE_X_FRAC = 0.8

# Candidate x is drawn from [cursor + min_dist, cursor + SPREAD * min_dist].
OBSTACLE_SPREAD_MULT = 2.5

# Max random lift above the ground, as a fraction of viewport height.
OBSTACLE_MAX_LIFT_FRAC = 0.3

# No high obstacles right in front of the launcher.
LAUNCH_GUARD_DX = 100.0
LAUNCH_GUARD_DY = 50.0

# Obstacles further than this (fraction of viewport width) behind the camera are evicted.
EVICT_BEHIND_FRAC = 0.5

# ==============================================================================
# Camera
# ==============================================================================

# Camera keeps the projectile this far (fraction of viewport width) from the left edge.
CAMERA_LEAD_FRAC = 0.2
