"""Closed value sets for enumerated entity attributes."""

from enum import Enum


class Gender(str, Enum):
    WOMAN = "woman"
    MAN = "man"
    NON_BINARY = "non_binary"
    OTHER = "other"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class Ethnicity(str, Enum):
    ASIAN = "asian"
    WHITE_OR_CAUCASIAN = "white_or_caucasian"
    BLACK_OR_AFRICAN_AMERICAN = "black_or_african_american"
    AMERICAN_INDIAN_OR_ALASKA_NATIVE = "american_indian_or_alaska_native"
    NATIVE_HAWAIIAN_OR_PACIFIC_ISLANDER = "native_hawaiian_or_pacific_islander"
    LATINO_OR_HISPANIC = "latino_or_hispanic"
    OTHER = "other"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class AgeRange(str, Enum):
    R18_24 = "18-24"
    R25_29 = "25-29"
    R30_34 = "30-34"
    R35_39 = "35-39"
    R40_44 = "40-44"
    R45_59 = "45-59"
    R60_64 = "60-64"
    R65_PLUS = "65+"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class LgbtStatus(str, Enum):
    YES = "yes"
    NO = "no"
    ALLY = "ally"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class FliStatus(str, Enum):
    """First-generation / low-income status."""

    FIRST_GENERATION = "first_generation"
    LOW_INCOME = "low_income"
    NEITHER = "neither"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class StudentStage(str, Enum):
    FRESHMAN = "freshman"
    SOPHOMORE = "sophomore"
    JUNIOR = "junior"
    SENIOR = "senior"
    MASTERS_STUDENT = "masters_student"
    PHD_STUDENT = "phd_student"
    RECENT_GRADUATE = "recent_graduate"


class MentorYearsExperience(str, Enum):
    Y2_5 = "2-5"
    Y6_10 = "6-10"
    Y11_15 = "11-15"
    Y16_20 = "16-20"
    Y21_PLUS = "21+"


class MentorExperienceLevel(str, Enum):
    INTERMEDIATE = "intermediate"
    FIRST_LEVEL_MANAGEMENT = "first_level_management"
    MIDDLE_MANAGEMENT = "middle_management"
    SENIOR_OR_EXECUTIVE = "senior_or_executive"


class VolunteerHearAbout(str, Enum):
    """How a volunteer or mentor heard about the program."""

    LINKEDIN = "linkedin"
    UNIVERSITY = "university"
    COMPANY_SOCIAL_IMPACT_TEAM = "company_social_impact_team"
    COLLEAGUE = "colleague"
    DFG_MEMBER = "dfg_member"
    NONPROFIT = "nonprofit"
    ONLINE_AD = "online_ad"
    INSTAGRAM = "instagram"
    WORD_OF_MOUTH = "word_of_mouth"
    BOOTCAMP = "bootcamp"
    DISCORD_OR_SLACK = "discord_or_slack"
    UNKNOWN = "unknown"
    OTHER = "other"


class NonprofitHearAbout(str, Enum):
    LINKEDIN = "linkedin"
    FORMER_DFG_CLIENT = "former_dfg_client"
    DFG_MEMBER = "dfg_member"
    ONLINE_AD = "online_ad"
    NEWS_ARTICLE = "news_article"
    SOCIAL_MEDIA = "social_media"
    COMPANY_NONPROFIT_NETWORK = "company_nonprofit_network"
    FAST_FORWARD = "fast_forward"
    ALL_STARS_HELPING_KIDS = "all_stars_helping_kids"
    WORD_OF_MOUTH = "word_of_mouth"
    OTHER = "other"


class ClientSize(str, Enum):
    """Headcount band of a nonprofit client."""

    S0 = "0"
    S1_5 = "1-5"
    S6_20 = "6-20"
    S21_50 = "21-50"
    S51_100 = "51-100"
    S101_500 = "101-500"
    S500_PLUS = "500+"


class ImpactCause(str, Enum):
    ANIMALS = "animals"
    CAREER_AND_PROFESSIONAL_DEVELOPMENT = "career_and_professional_development"
    DISASTER_RELIEF = "disaster_relief"
    EDUCATION = "education"
    ENVIRONMENT_AND_SUSTAINABILITY = "environment_and_sustainability"
    FAITH_AND_RELIGION = "faith_and_religion"
    HEALTH_AND_MEDICINE = "health_and_medicine"
    GLOBAL_RELATIONS = "global_relations"
    POVERTY_AND_HUNGER = "poverty_and_hunger"
    SENIOR_SERVICES = "senior_services"
    JUSTICE_AND_EQUITY = "justice_and_equity"
    VETERANS_AND_MILITARY_FAMILIES = "veterans_and_military_families"
    OTHER = "other"


class JobStatus(str, Enum):
    """Lifecycle state of an integration job.

    `pending` is the only non-terminal state.
    """

    PENDING = "pending"
    COMPLETE = "complete"
    CANCELLED = "cancelled"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self is not JobStatus.PENDING


class JobType(str, Enum):
    """Known `jobType` discriminators. Stored as-is, never validated."""

    AIRTABLE_IMPORT_BASE = "airtable_import_base"
    EXPORT_USERS = "export_users"
    UNDO_WORKSPACE_EXPORT = "undo_workspace_export"


class ExportDestination(str, Enum):
    GOOGLE_WORKSPACE = "google_workspace"
    OKTA = "okta"
