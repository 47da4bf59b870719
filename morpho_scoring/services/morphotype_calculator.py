"""모포타입 질문지 → 프로필 계산

16문항 (5블록: 구조, 비율, 가동성, 부착, 대사).
답변이 없거나 인식할 수 없는 값은 중립 기본값으로 처리한다.
"""

import logging
from typing import Dict, List, Optional

from langsmith import traceable

from shared.models.morphotype import (
    MorphotypeProfile,
    LiftAnalysis,
    MobilityWork,
    SomatotypeScores,
    normalize_profile,
)
from morpho_scoring.config import settings
from morpho_scoring.models.questionnaire import MorphoQuestion, QuestionOption
from morpho_scoring.services.category_defaults import CATEGORY_DEFAULTS, CATEGORY_LABELS
from morpho_scoring.services.scoring_engine import ScoringEngine

logger = logging.getLogger(__name__)


def _q(order: int, key: str, category: str, text: str, help_text: str, options) -> MorphoQuestion:
    return MorphoQuestion(
        id=f"q{order}",
        question_key=key,
        question_text=text,
        category=category,
        help_text=help_text,
        options=[QuestionOption(label=label, value=value, description=desc) for label, value, desc in options],
        order_index=order,
    )


MORPHO_QUESTIONS: List[MorphoQuestion] = [
    # 블록 1: 골격 구조
    _q(1, "wrist_circumference", "structure",
       "Measure your wrist at its thinnest point, just below the bone. No tape? Wrap your thumb and middle finger around it.",
       "Indicates your frame size",
       [("< 16 cm (fingers overlap)", "fine", "Fine frame"),
        ("16-18 cm (fingers touch)", "medium", "Medium frame"),
        ("> 18 cm (fingers do not touch)", "large", "Large frame")]),
    _q(2, "shoulder_hip_ratio", "structure",
       "Facing a mirror, how do your shoulders compare to your hips?",
       "Upper body structure",
       [("Shoulders clearly wider (V shape)", "wide", "Pressing advantage"),
        ("Shoulders slightly wider or equal", "medium", "Balanced"),
        ("Hips as wide or wider", "narrow", "Shoulders to develop")]),
    _q(3, "ribcage_depth", "structure",
       "From the side, how does your ribcage look?",
       "Affects the bench press",
       [("Deep and rounded (thick chest)", "deep", "Bench advantage"),
        ("Average", "medium", "Standard"),
        ("Flat and narrow", "narrow", "Longer bench range")]),

    # 블록 2: 분절 비율
    _q(4, "torso_length", "proportions",
       "Seated next to someone your height who is standing, where is your torso?",
       "Torso to leg ratio",
       [("My torso sits lower (long legs)", "short", "Short torso"),
        ("About the same level", "medium", "Balanced"),
        ("My torso sits higher (long torso)", "long", "Long torso")]),
    _q(5, "arm_length", "proportions",
       "Spread your arms in a T and measure fingertip to fingertip. Compare it to your height.",
       "Example: height 175 cm, arm span 180 cm = long arms",
       [("Span shorter than height", "short", "Bench advantage"),
        ("Span equal to height (± 2 cm)", "medium", "Standard"),
        ("Span longer than height", "long", "Deadlift advantage")]),
    _q(6, "femur_length", "proportions",
       "Do a deep bodyweight squat with flat feet. What happens naturally?",
       "Femur length",
       [("I sink easily, back upright, heels down", "short", "Short femurs, easy squat"),
        ("Good position with a slight forward lean", "medium", "Average femurs"),
        ("My heels rise or I lean far forward", "long", "Long femurs, harder squat")]),
    _q(7, "knee_valgus", "proportions",
       "When you squat or stand up from a chair, your knees tend to:",
       "Knee valgus (knees caving in)",
       [("Stay aligned with the feet", "none", "Good tracking"),
        ("Cave in slightly", "slight", "Mild valgus, strengthen glutes"),
        ("Cave in clearly", "pronounced", "Pronounced valgus, corrective work")]),

    # 블록 3: 가동성
    _q(8, "ankle_mobility", "mobility",
       "Knee to wall test: foot 10 cm from the wall, can you touch the wall with your knee without lifting the heel?",
       "Ankle dorsiflexion, crucial for squats",
       [("Easily, I can even move the foot back", "good", "Good mobility"),
        ("Yes, but barely", "average", "Adequate mobility"),
        ("No, my heel lifts or I cannot reach", "limited", "Limited mobility, work needed")]),
    _q(9, "posterior_chain", "mobility",
       "Standing with straight legs, try to touch your toes:",
       "Hamstring and posterior chain flexibility",
       [("I touch my toes easily or beyond", "good", "Good flexibility"),
        ("I reach my ankles or toes", "average", "Average flexibility"),
        ("I reach my shins or higher", "limited", "Limited flexibility")]),
    _q(10, "wrist_mobility", "mobility",
       "In a push-up position with straight arms, are your wrists aligned with elbows and shoulders?",
       "Wrist alignment, affects pressing movements",
       [("Yes, wrists straight in line", "good", "Good alignment"),
        ("Slightly tilted in or out", "average", "Mild misalignment"),
        ("Clearly off-axis, discomfort or pain", "limited", "Straight bar not advised")]),

    # 블록 4: 근육 부착
    _q(11, "biceps_insertion", "insertions",
       "Flex your biceps at 90 degrees. How many fingers fit between the elbow crease and the muscle?",
       "Biceps insertion test",
       [("0-1 finger (muscle close to the elbow)", "high", "Excellent biceps potential"),
        ("1-2 fingers", "medium", "Average potential"),
        ("2+ fingers (large gap)", "low", "Limited volume, better peak")]),
    _q(12, "calf_insertion", "insertions",
       "Look at your calves from the side. The muscle belly reaches:",
       "Calf insertion",
       [("Low, close to the Achilles tendon", "high", "Strong calf potential"),
        ("Halfway", "medium", "Average potential"),
        ("High, far from the heel", "low", "Harder to develop")]),
    _q(13, "chest_insertion", "insertions",
       "Flex your chest. The gap between the pecs at the sternum is:",
       "Chest insertion",
       [("Very small, the pecs almost touch", "high", "Full chest"),
        ("Medium gap (2-3 cm)", "medium", "Standard"),
        ("Wide gap, clearly separated", "low", "Inner chest harder")]),

    # 블록 5: 대사 / 경험
    _q(14, "weight_tendency", "metabolism",
       "If you eat more than usual for two weeks:",
       "Metabolic tendency",
       [("I barely gain any weight", "lean", "Fast metabolism"),
        ("I gain a little, mix of muscle and fat", "balanced", "Balanced metabolism"),
        ("I store easily, mostly around the belly", "gain-prone", "Slow metabolism")]),
    _q(15, "natural_strength", "metabolism",
       "BEFORE lifting, you were naturally:",
       "Baseline natural strength",
       [("Rather weak", "below-average", "Technique first"),
        ("Average", "average", "Standard progression"),
        ("Naturally strong", "above-average", "Can load faster")]),
    _q(16, "best_responders", "metabolism",
       "Which muscles seem to respond best to your training?",
       "Identify your genetic strong points",
       [("Back and shoulders", "back_shoulders", "Pulling movements"),
        ("Chest and arms", "chest_arms", "Pushing movements"),
        ("Legs (quads, glutes)", "legs", "Lower body"),
        ("Everything is hard / beginner", "none", "Global work needed")]),
]

# 질문 키 → (섹션, 필드)
ANSWER_FIELDS: Dict[str, tuple] = {
    "wrist_circumference": ("structure", "frame_size"),
    "shoulder_hip_ratio": ("structure", "shoulder_to_hip"),
    "ribcage_depth": ("structure", "ribcage_depth"),
    "torso_length": ("proportions", "torso_length"),
    "arm_length": ("proportions", "arm_length"),
    "femur_length": ("proportions", "femur_length"),
    "knee_valgus": ("proportions", "knee_valgus"),
    "ankle_mobility": ("mobility", "ankle_dorsiflexion"),
    "posterior_chain": ("mobility", "posterior_chain"),
    "wrist_mobility": ("mobility", "wrist_mobility"),
    "biceps_insertion": ("insertions", "biceps"),
    "calf_insertion": ("insertions", "calves"),
    "chest_insertion": ("insertions", "chest"),
    "weight_tendency": ("metabolism", "weight_tendency"),
    "natural_strength": ("metabolism", "natural_strength"),
    "best_responders": ("metabolism", "best_responders"),
}


# 리프트 분석 블록 → 채점에 쓰는 카테고리 기본값
LIFT_CATEGORIES: Dict[str, str] = {
    "squat": "squat",
    "deadlift": "deadlift",
    "bench": "bench",
    "curls": "curl",
}


def get_morpho_questions() -> List[MorphoQuestion]:
    return MORPHO_QUESTIONS


class MorphotypeCalculator:
    """질문지 답변 → MorphotypeProfile"""

    def __init__(self, engine: Optional[ScoringEngine] = None):
        self.engine = engine or ScoringEngine()

    @traceable(name="morphotype_calculation")
    def calculate(self, answers: Dict[str, str], user_id: Optional[str] = None) -> MorphotypeProfile:
        """
        답변으로 프로필 계산

        Args:
            answers: {question_key: value}
            user_id: 저장 대상 사용자 (호출자가 전달)

        Returns:
            정규화된 MorphotypeProfile
        """
        raw: Dict[str, Dict[str, str]] = {
            "structure": {},
            "proportions": {},
            "mobility": {},
            "insertions": {},
            "metabolism": {},
        }
        for key, value in (answers or {}).items():
            if key not in ANSWER_FIELDS:
                logger.warning(f"알 수 없는 질문 키 무시: {key}")
                continue
            section, field = ANSWER_FIELDS[key]
            raw[section][field] = value

        # 레거시 답변 값(wide, fast 등)도 여기서 현재 어휘로 매핑됨
        base = normalize_profile({**raw, "user_id": user_id})

        global_type = self._determine_global_type(base)
        primary, scores = self._determine_somatotype(base)
        profile = base.model_copy(update={"global_type": global_type})

        recommended, avoid = self._rank_categories(profile)

        return profile.model_copy(update={
            "primary": primary,
            "secondary": None,
            "scores": SomatotypeScores(**scores),
            "strengths": self._strengths(profile),
            "weaknesses": self._weaknesses(profile),
            "recommended_exercises": recommended,
            "exercises_to_avoid": avoid,
            "mobility_work": self._mobility_work(profile),
            "lift_analysis": self._lift_analysis(profile),
        })

    def _determine_global_type(self, profile: MorphotypeProfile) -> str:
        """긴 분절 2개 이상 → longiligne, 짧은 분절 2개 이상 → breviligne"""
        p = profile.proportions
        segments = [p.torso_length, p.arm_length, p.femur_length]
        if segments.count("long") >= 2:
            return "longiligne"
        if segments.count("short") >= 2:
            return "breviligne"
        return "balanced"

    def _determine_somatotype(self, profile: MorphotypeProfile):
        """레거시 ecto/meso/endo 점수 (동점이면 ecto → meso → endo 순)"""
        s = profile.structure
        m = profile.metabolism
        scores = {"ecto": 0, "meso": 0, "endo": 0}

        if s.frame_size == "fine":
            scores["ecto"] += 2
        elif s.frame_size == "large":
            scores["endo"] += 1
            scores["meso"] += 1
        else:
            scores["meso"] += 1

        if s.shoulder_to_hip == "wide":
            scores["meso"] += 2
        elif s.shoulder_to_hip == "narrow":
            scores["ecto"] += 1

        if m.weight_tendency == "lean":
            scores["ecto"] += 3
        elif m.weight_tendency == "gain-prone":
            scores["endo"] += 3
        else:
            scores["meso"] += 2

        if m.natural_strength == "above-average":
            scores["meso"] += 2
        elif m.natural_strength == "below-average":
            scores["ecto"] += 1

        primary_key = max(("ecto", "meso", "endo"), key=lambda k: scores[k])
        names = {"ecto": "ectomorph", "meso": "mesomorph", "endo": "endomorph"}
        return names[primary_key], scores

    def _rank_categories(self, profile: MorphotypeProfile):
        """카테고리 기본값을 엔진으로 채점해 추천/회피 목록 생성"""
        scored = [
            (CATEGORY_LABELS[key], self.engine.score(profile, rec).score)
            for key, rec in CATEGORY_DEFAULTS.items()
        ]
        recommended = [
            label for label, score in sorted(scored, key=lambda x: x[1], reverse=True)
            if score >= settings.recommend_threshold
        ]
        avoid = [
            label for label, score in sorted(scored, key=lambda x: x[1])
            if score <= settings.avoid_threshold
        ]
        return recommended, avoid

    def _strengths(self, profile: MorphotypeProfile) -> List[str]:
        s, p, i, m = profile.structure, profile.proportions, profile.insertions, profile.metabolism
        strengths = []
        if p.arm_length == "long":
            strengths.append("Deadlift: long arms shorten the pull")
        if p.arm_length == "short":
            strengths.append("Bench: short arms reduce the range")
        if p.femur_length == "short":
            strengths.append("Squat: short femurs give an ideal position")
        if p.femur_length == "long":
            strengths.append("Sumo deadlift: long femurs are an advantage")
        if s.ribcage_depth == "deep":
            strengths.append("Bench: a deep ribcage reduces the range")
        if s.shoulder_to_hip == "wide":
            strengths.append("Wide shoulders give good stability")
        if i.biceps == "high":
            strengths.append("Strong biceps potential")
        if i.calves == "high":
            strengths.append("Strong calf potential")
        if i.chest == "high":
            strengths.append("Full chest insertions")
        if m.natural_strength == "above-average":
            strengths.append("High natural strength")
        if s.frame_size == "large":
            strengths.append("Solid frame with good mass potential")

        if not strengths:
            strengths.append("Balanced profile with no major disadvantage")
        return strengths

    def _weaknesses(self, profile: MorphotypeProfile) -> List[str]:
        s, p, i, mob = profile.structure, profile.proportions, profile.insertions, profile.mobility
        weaknesses = []
        if p.femur_length == "long":
            weaknesses.append("Squat: long femurs force a forward lean")
        if p.arm_length == "long":
            weaknesses.append("Bench: long arms increase the range")
        if p.arm_length == "short":
            weaknesses.append("Deadlift: short arms increase the range")
        if p.torso_length == "long":
            weaknesses.append("Deadlift: a long torso loads the lower back")
        if s.ribcage_depth == "narrow":
            weaknesses.append("Bench: a flat ribcage increases the range")
        if s.shoulder_to_hip == "narrow":
            weaknesses.append("Narrow shoulders to develop")
        if s.frame_size == "fine":
            weaknesses.append("Fine frame, slower mass gain")
        if mob.ankle_dorsiflexion == "limited":
            weaknesses.append("Stiff ankles limit the squat")
        if p.knee_valgus != "none":
            weaknesses.append("Knee valgus to correct")
        if mob.wrist_mobility == "limited":
            weaknesses.append("Fragile wrists, adapt your grips")
        if i.biceps == "low":
            weaknesses.append("Biceps: high insertion limits volume")
        if i.calves == "low":
            weaknesses.append("Calves: high insertion makes growth harder")
        if i.chest == "low":
            weaknesses.append("Chest: wide insertion makes the inner chest harder")
        return weaknesses

    def _mobility_work(self, profile: MorphotypeProfile) -> List[MobilityWork]:
        mob, p = profile.mobility, profile.proportions
        work = []

        if mob.ankle_dorsiflexion == "limited":
            work.append(MobilityWork(
                area="Ankles (dorsiflexion)",
                priority="high",
                exercises=["Knee to wall (5 min/day)", "Deep squat holds (30 s)", "Calf stretch"],
            ))
        elif mob.ankle_dorsiflexion == "average":
            work.append(MobilityWork(
                area="Ankles",
                priority="medium",
                exercises=["Knee to wall (3 min/day)"],
            ))

        if mob.posterior_chain == "limited":
            work.append(MobilityWork(
                area="Posterior chain",
                priority="high",
                exercises=["Light good mornings", "Hamstring stretch", "Light Romanian deadlift"],
            ))

        if mob.wrist_mobility == "limited":
            work.append(MobilityWork(
                area="Wrists",
                priority="high",
                exercises=[
                    "Forearm strengthening (wrist curls)",
                    "Flexor and extensor stretches",
                    "Push-ups on parallel handles",
                    "Avoid the straight bar on curls and bench",
                ],
            ))
        elif mob.wrist_mobility == "average":
            work.append(MobilityWork(
                area="Wrists",
                priority="medium",
                exercises=["Wrist warm-up before pressing", "Wrist circles"],
            ))

        if p.knee_valgus != "none":
            work.append(MobilityWork(
                area="Glutes / abductors",
                priority="high" if p.knee_valgus == "pronounced" else "medium",
                exercises=["Clamshells", "Banded monster walks", "Hip abductions", "Banded squats"],
            ))

        return work

    def _lift_analysis(self, profile: MorphotypeProfile) -> Dict[str, LiftAnalysis]:
        """주요 리프트별 분석 (엔진 결과 + 체형별 변형 목록)"""
        variant_builders = {
            "squat": self._squat_variants,
            "deadlift": self._deadlift_variants,
            "bench": self._bench_variants,
            "curls": self._curl_variants,
        }
        analysis = {}
        for lift, category in LIFT_CATEGORIES.items():
            result = self.engine.score(profile, CATEGORY_DEFAULTS[category])
            analysis[lift] = LiftAnalysis(
                score=result.score,
                advantages=result.advantages,
                disadvantages=result.disadvantages,
                variants=variant_builders[lift](profile),
                tips=result.modifications,
            )
        return analysis

    def _squat_variants(self, profile: MorphotypeProfile) -> List[str]:
        """적합한 순서대로, 부적합 변형은 제외"""
        long_femurs = profile.proportions.femur_length == "long"
        limited_ankle = profile.mobility.ankle_dorsiflexion == "limited"
        severe_valgus = profile.proportions.knee_valgus == "pronounced"

        # 문제 2개 이상이면 프리 스쿼트 대신 머신 위주
        if sum([long_femurs, limited_ankle, severe_valgus]) >= 2:
            variants = ["Hack squat", "Leg press (feet high)", "Belt squat"]
            if long_femurs and not severe_valgus:
                variants.append("Box squat")
            return variants
        if long_femurs:
            variants = ["Box squat", "Hack squat", "Wide-stance squat"]
            if not limited_ankle:
                variants.append("Safety bar squat")
            return variants
        if limited_ankle:
            return ["Heel-elevated squat", "Hack squat", "Heel-elevated goblet squat"]
        if profile.proportions.femur_length == "short":
            return ["Back squat", "Front squat", "Full-depth squat"]
        return ["Back squat", "Goblet squat", "Front squat"]

    def _deadlift_variants(self, profile: MorphotypeProfile) -> List[str]:
        p = profile.proportions
        long_arms, short_arms = p.arm_length == "long", p.arm_length == "short"
        long_femurs = p.femur_length == "long"
        long_torso = p.torso_length == "long"

        risk_factors = sum([long_torso, short_arms, long_femurs and long_torso])
        if risk_factors >= 2:
            variants = ["Romanian deadlift", "Trap bar deadlift (high handles)", "Hip thrust", "Rack pull"]
            if long_femurs and not short_arms:
                variants.append("Sumo deadlift")
            return variants
        if long_torso:
            variants = ["Trap bar deadlift", "Sumo deadlift", "Romanian deadlift"]
            if long_arms:
                variants.append("Conventional deadlift (moderate loads)")
            return variants
        if short_arms:
            variants = ["Sumo deadlift", "Trap bar deadlift"]
            if p.femur_length == "short":
                variants.append("Conventional deadlift")
            return variants
        if long_arms and p.torso_length == "short":
            return ["Conventional deadlift", "Sumo deadlift", "Deficit deadlift"]
        if long_femurs:
            return ["Sumo deadlift", "Conventional deadlift"]
        return ["Conventional deadlift", "Sumo deadlift", "Trap bar deadlift"]

    def _bench_variants(self, profile: MorphotypeProfile) -> List[str]:
        long_arms = profile.proportions.arm_length == "long"
        narrow_ribcage = profile.structure.ribcage_depth == "narrow"
        wrist_issues = profile.mobility.wrist_mobility == "limited"

        if long_arms:
            variants = ["Floor press", "Dumbbell bench press"]
            if not narrow_ribcage and not wrist_issues:
                variants.append("Barbell bench press")
            return variants
        if narrow_ribcage:
            variants = ["Dumbbell bench press"]
            if not wrist_issues:
                variants.append("Barbell bench press")
            return variants
        if wrist_issues:
            return ["Neutral-grip dumbbell press", "Floor press"]
        return ["Barbell bench press", "Dumbbell bench press"]

    def _curl_variants(self, profile: MorphotypeProfile) -> List[str]:
        """손목이 불편하면 스트레이트 바 제외"""
        insertion = profile.insertions.biceps

        if profile.mobility.wrist_mobility == "limited":
            if insertion == "high":
                return ["EZ-bar curl", "Incline dumbbell curl", "Hammer curl"]
            if insertion == "low":
                return ["Concentration curl", "EZ-bar preacher curl", "Hammer curl"]
            return ["EZ-bar curl", "Dumbbell curl", "Hammer curl"]
        if insertion == "high":
            return ["Barbell curl", "Incline dumbbell curl", "Preacher curl"]
        if insertion == "low":
            return ["Concentration curl", "Preacher curl", "Incline dumbbell curl"]
        return ["Barbell curl", "Dumbbell curl", "Preacher curl"]


def calculate_morphotype(answers: Dict[str, str], user_id: Optional[str] = None) -> MorphotypeProfile:
    """기본 계산기로 프로필 계산"""
    return MorphotypeCalculator().calculate(answers, user_id=user_id)
