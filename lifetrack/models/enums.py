from enum import Enum


class ExerciseType(str, Enum):
    """Kind of exercise an activity belongs to"""
    WEIGHT = "weight"  # weight lifting
    CARDIO = "cardio"  # treadmill, jogging, cycling, swimming
    SPORT = "sport"  # badminton, soccer, cricket
    YOGA = "yoga"
    BODY_WEIGHT = "body-weight"  # push ups, pull ups
    TREKKING = "trekking"


class ExerciseIntensity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class MuscleGroup(str, Enum):
    """Primary muscle group worked by an exercise"""
    BICEP = "bicep"
    TRICEP = "tricep"
    SHOULDER = "shoulder"
    CHEST = "chest"
    FOREARM = "forearm"
    QUAD = "quad"
    CALF = "calf"
    HAMSTRING = "hamstring"
    BACK = "back"
    CORE = "core"
    GLUTES = "glutes"
    NONE = "none"


class Level(str, Enum):
    """Four-step scale shared by nutrition intakes, lifestyle parameters and task consequences"""
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
