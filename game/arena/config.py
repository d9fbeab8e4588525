"""
Gameplay configuration for the stealth arena
Distances are in arena units (pixels), times in seconds.
"""

# Arena
ARENA_CONFIG = {
    "width": 960,
    "height": 600,
    "wall_margin": 20.0,       # player is clamped this far from each edge
    "hit_radius": 12.0,        # projectile vs agent
    "noise_lifetime": 0.4,
    "max_frame_dt": 0.05,      # frame driver clamp
}

# Controllable agent
PLAYER_CONFIG = {
    "speed": 180.0,
    "health": 100.0,
    "spawn_offset_y": 60.0,    # below arena center
}

# Autonomous agents
ENEMY_CONFIG = {
    "speed": 90.0,
    "health": 60.0,
    "vision_range": 260.0,
    "vision_dot": 0.25,        # ~75 deg half-cone
    "waypoint_reach": 10.0,
    "search_reach": 4.0,
    "search_speed_mult": 0.8,
    "wander_chance": 0.02,     # per tick, while standing on the search target
    "wander_offset": 30.0,
    "alert_time_min": 4.0,
    "alert_time_spread": 2.0,
    "lose_range": 300.0,       # attack -> alert
    "lost_alert_time": 3.0,
    "engage_range": 120.0,     # closes distance beyond this
    "chase_speed_mult": 1.1,
    "aim_jitter": 0.15,        # total spread in radians
    "initial_cooldown_max": 0.4,
}

# Player loadout, selected with 1 / 2
PLAYER_WEAPONS = [
    {"name": "Quiet Repeater", "fire_rate": 6.0, "damage": 12.0, "noise_radius": 90.0, "bullet_speed": 480.0},
    {"name": "Loud Thumper", "fire_rate": 2.5, "damage": 28.0, "noise_radius": 200.0, "bullet_speed": 420.0},
]

# One archetype is drawn per enemy at spawn
ENEMY_ARCHETYPES = [
    {"name": "Chipper", "fire_rate": 5.0, "damage": 8.0, "noise_radius": 90.0, "bullet_speed": 360.0},
    {"name": "Grunt", "fire_rate": 3.0, "damage": 12.0, "noise_radius": 120.0, "bullet_speed": 380.0},
    {"name": "Bomber", "fire_rate": 1.5, "damage": 20.0, "noise_radius": 180.0, "bullet_speed": 300.0},
    {"name": "Silenced Elite", "fire_rate": 3.5, "damage": 10.0, "noise_radius": 60.0, "bullet_speed": 400.0},
]

# Patrol loops, one enemy per route, spawned on the first waypoint
PATROL_ROUTES = [
    [(140, 140), (340, 160), (260, 240)],
    [(600, 120), (820, 160), (760, 260)],
    [(280, 360), (440, 440), (320, 500)],
    [(640, 340), (820, 440), (680, 500)],
]
