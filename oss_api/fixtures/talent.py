"""
District workforce profiles and the pre-qualified expatriate talent pool.
"""

from oss_api.models.domain import DistrictTalent, TalentCandidate

SKILLS = ("textile", "manufacturing", "technology", "engineering",
          "healthcare", "logistics", "agriculture", "finance")

# name, code, (lat, lng), workforce, unemployment, youth,
# skill densities (SKILLS order),
# (universities, technical institutes, vocational centers, graduates/yr, engineers/yr),
# (english, chinese, japanese, korean),
# (entry, skilled, professional, managerial) wages,
# (immediate, 3 months, 6 months) availability
_DISTRICT_ROWS = [
    ("Dhaka", "DHK", (23.8103, 90.4125), 8_500_000, 4.2, 3_200_000,
     (850, 720, 1200, 680, 450, 380, 120, 920),
     (52, 28, 145, 85_000, 12_000), (38, 5, 3, 4),
     (15_000, 25_000, 45_000, 85_000), (78, 88, 95)),
    ("Chittagong", "CTG", (22.3569, 91.7832), 4_200_000, 5.1, 1_800_000,
     (620, 880, 420, 520, 320, 950, 180, 380),
     (18, 12, 68, 28_000, 4_500), (28, 8, 6, 5),
     (13_500, 22_000, 38_000, 72_000), (82, 90, 96)),
    ("Gazipur", "GAZ", (24.0022, 90.4264), 2_800_000, 3.8, 1_200_000,
     (1450, 1120, 380, 420, 280, 520, 220, 180),
     (8, 15, 92, 18_000, 2_800), (22, 3, 2, 7),
     (12_500, 20_000, 35_000, 65_000), (85, 92, 97)),
    ("Narayanganj", "NAR", (23.6144, 90.5000), 1_500_000, 4.5, 620_000,
     (1680, 920, 280, 350, 220, 420, 150, 280),
     (4, 8, 48, 9_500, 1_200), (18, 4, 2, 3),
     (12_000, 19_000, 32_000, 58_000), (88, 94, 98)),
    ("Sylhet", "SYL", (24.8949, 91.8687), 1_200_000, 6.2, 520_000,
     (180, 220, 320, 280, 380, 280, 520, 280),
     (6, 5, 28, 8_500, 1_100), (42, 2, 1, 2),
     (11_000, 18_000, 30_000, 55_000), (72, 82, 90)),
    ("Khulna", "KHL", (22.8456, 89.5403), 1_800_000, 5.8, 780_000,
     (280, 520, 220, 380, 320, 420, 680, 280),
     (9, 7, 42, 12_000, 1_800), (24, 3, 2, 2),
     (10_500, 17_000, 28_000, 52_000), (76, 85, 92)),
]


def build_districts() -> list[DistrictTalent]:
    districts = []
    for (name, code, (lat, lng), workforce, unemployment, youth, densities,
         education, languages, wages, availability) in _DISTRICT_ROWS:
        universities, technical, vocational, graduates, engineers = education
        english, chinese, japanese, korean = languages
        entry, skilled, professional, managerial = wages
        immediate, three_months, six_months = availability
        districts.append(DistrictTalent(
            district_name=name,
            district_code=code,
            coordinates={"lat": lat, "lng": lng},
            total_workforce=workforce,
            unemployment_rate=unemployment,
            youth_population=youth,
            skill_density=dict(zip(SKILLS, densities)),
            education={
                "universities": universities,
                "technical_institutes": technical,
                "vocational_centers": vocational,
                "graduates_per_year": graduates,
                "engineers_per_year": engineers,
            },
            language_skills={"english": english, "chinese": chinese,
                             "japanese": japanese, "korean": korean},
            wages={"entrylevel": entry, "skilled": skilled,
                   "professional": professional, "managerial": managerial},
            availability={"immediate": immediate, "training_3_months": three_months,
                          "training_6_months": six_months},
        ))
    return districts


def build_talent_pool() -> list[TalentCandidate]:
    return [
        TalentCandidate("talent-001", "Dr. Chen Wei", "China", "Manufacturing Operations Director",
                        ["Lean Manufacturing", "Six Sigma", "Quality Control", "Supply Chain"],
                        "15+ years in textile manufacturing", "PhD Industrial Engineering",
                        ["English", "Chinese", "Bengali (Basic)"], "within-30-days",
                        "$4,500-6,000/month", 95),
        TalentCandidate("talent-002", "Rajesh Kumar", "India", "Production Manager",
                        ["Garment Production", "Team Management", "Process Optimization"],
                        "10 years in RMG sector", "MBA Operations Management",
                        ["English", "Hindi", "Bengali"], "immediate",
                        "$2,500-3,500/month", 88),
        TalentCandidate("talent-003", "Sarah Johnson", "United States", "Chief Technology Officer",
                        ["Cloud Architecture", "DevOps", "Team Leadership", "AI/ML"],
                        "12 years in tech startups", "MS Computer Science",
                        ["English"], "within-60-days",
                        "$7,000-10,000/month", 92),
        TalentCandidate("talent-004", "Kim Min-jun", "South Korea", "Senior Software Architect",
                        ["System Design", "Microservices", "React", "Node.js"],
                        "8 years in fintech", "BS Software Engineering",
                        ["English", "Korean"], "within-30-days",
                        "$5,000-7,000/month", 90),
        TalentCandidate("talent-005", "Dr. Hans Mueller", "Germany", "Quality Assurance Director",
                        ["GMP Compliance", "Quality Systems", "Regulatory Affairs", "Validation"],
                        "18 years pharmaceutical industry", "PhD Pharmaceutical Sciences",
                        ["English", "German"], "within-60-days",
                        "$6,500-8,500/month", 96),
        TalentCandidate("talent-006", "Priya Sharma", "India", "Regulatory Affairs Manager",
                        ["Drug Registration", "WHO-GMP", "Documentation", "Compliance"],
                        "9 years in pharma regulatory", "M.Pharm Regulatory Affairs",
                        ["English", "Hindi"], "immediate",
                        "$3,000-4,000/month", 87),
        TalentCandidate("talent-007", "Maria Santos", "Philippines", "Food Safety Manager",
                        ["HACCP", "Food Safety", "Quality Assurance", "ISO 22000"],
                        "11 years in food processing", "BS Food Technology",
                        ["English", "Filipino"], "within-30-days",
                        "$2,800-3,800/month", 85),
        TalentCandidate("talent-008", "Ahmed Al-Rashid", "UAE", "Project Director",
                        ["Project Management", "Civil Engineering", "Cost Control", "Safety"],
                        "14 years in infrastructure projects", "MSc Civil Engineering, PMP",
                        ["English", "Arabic"], "within-60-days",
                        "$5,500-7,500/month", 91),
        TalentCandidate("talent-009", "Emily Chen", "Singapore", "Chief Financial Officer",
                        ["Financial Planning", "Tax Strategy", "Compliance", "FDI Structuring"],
                        "13 years in multinational corporations", "CPA, MBA Finance",
                        ["English", "Chinese"], "within-30-days",
                        "$6,000-8,000/month", 94),
        TalentCandidate("talent-010", "Takeshi Yamamoto", "Japan", "Automation Engineer",
                        ["Industrial Automation", "PLC Programming", "Robotics", "SCADA"],
                        "10 years in manufacturing automation", "MS Electrical Engineering",
                        ["English", "Japanese"], "within-30-days",
                        "$5,000-6,500/month", 89),
    ]
