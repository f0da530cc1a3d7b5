# Indices / enums used across modules (keep ints for JIT friendliness)

# node_i columns (int)
NODE_PRIORITY = 0
NODE_SERVICE  = 1  # service time in seconds
F_NODE_I      = 2 # 2 features

# veh_i columns (int)
VEH_START = 0  # start depot node, -1 when the vehicle has none
VEH_END   = 1  # end depot node, -1 when the vehicle has none
F_VEH_I   = 2

# veh_c columns (int, user cost units)
VEH_FIXED_COST = 0 # Cost that is applied if the vehicle is used at all.
VEH_PER_HOUR   = 1 # Cost per hour of travel time.
VEH_PER_KM     = 2 # Cost per kilometre travelled.
F_VEH_C        = 3

# objective selection for the ranking
MODE_LEXICOGRAPHIC = 0
MODE_PRIORITY      = 1

RANKING_MODES = ("pairwise", "fixed")
