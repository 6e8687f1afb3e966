"""Built-in catalog used when the baseline files cannot be retrieved."""

from __future__ import annotations

from src.records.schema import BlogPost, Scholarship

FALLBACK_SCHOLARSHIPS: tuple[Scholarship, ...] = (
    Scholarship(
        id="1",
        title="Global Excellence Scholarship",
        country="United Kingdom",
        eligible_nationality="International",
        level="Master's",
        field="Computer Science",
        deadline="2025-09-30",
        sponsor="University of Oxford",
        eligibility=(
            "Applicants must hold an offer for a full‑time master's program at Oxford "
            "and demonstrate academic excellence."
        ),
        benefits="Full tuition and a stipend for living expenses.",
        description=(
            "The Global Excellence Scholarship is aimed at outstanding international students "
            "applying to master's degrees in Computer Science at Oxford University. The "
            "scholarship covers full tuition and provides a living stipend."
        ),
        link="https://www.ox.ac.uk/scholarships/global‑excellence",
        tags=("international", "computer science", "full scholarship"),
    ),
    Scholarship(
        id="2",
        title="African Leaders Fellowship",
        country="United States",
        eligible_nationality="African countries",
        level="PhD",
        field="Public Policy",
        deadline="2025-11-15",
        sponsor="Harvard Kennedy School",
        eligibility=(
            "Citizens of any African country with a strong record of leadership and a "
            "commitment to improving governance on the continent."
        ),
        benefits="Tuition waiver, travel allowance, and stipend.",
        description=(
            "The African Leaders Fellowship supports doctoral candidates in Public Policy who "
            "aspire to strengthen governance and development in Africa. Fellows receive "
            "comprehensive financial support during their studies."
        ),
        link="https://www.hks.harvard.edu/fellowships/african-leaders",
        tags=("africa", "public policy", "leadership"),
    ),
    Scholarship(
        id="3",
        title="Women in STEM Grant",
        country="Canada",
        eligible_nationality="International",
        level="Undergraduate",
        field="Engineering",
        deadline="2025-08-31",
        sponsor="University of Toronto",
        eligibility=(
            "Female students admitted to an undergraduate engineering program with strong "
            "academic records and extracurricular involvement."
        ),
        benefits="Partial tuition coverage and mentorship opportunities.",
        description=(
            "The Women in STEM Grant encourages gender diversity in engineering by providing "
            "financial support and mentorship to talented women pursuing undergraduate degrees "
            "at the University of Toronto."
        ),
        link="https://engineering.utoronto.ca/women-in-stem-grant",
        tags=("women", "engineering", "mentorship"),
    ),
    Scholarship(
        id="4",
        title="ASEAN Undergraduate Scholarship",
        country="Singapore",
        eligible_nationality="ASEAN countries",
        level="Undergraduate",
        field="Any field",
        deadline="2025-12-01",
        sponsor="National University of Singapore",
        eligibility=(
            "Citizens from ASEAN member states (excluding Singapore) who have applied to a "
            "full‑time undergraduate program."
        ),
        benefits="Full tuition and living allowance.",
        description=(
            "The ASEAN Undergraduate Scholarship is awarded to outstanding students from ASEAN "
            "countries who exhibit academic excellence, leadership potential, and a commitment "
            "to community service."
        ),
        link="https://nus.edu.sg/admissions/ASEAN-scholarship",
        tags=("asean", "undergraduate", "tuition"),
    ),
    Scholarship(
        id="5",
        title="Digital Innovators Award",
        country="Germany",
        eligible_nationality="International",
        level="Master's",
        field="Information Technology",
        deadline="2025-10-10",
        sponsor="Technical University of Munich",
        eligibility=(
            "Applicants must have a bachelor's degree in IT or a related field and demonstrate "
            "innovative project experience."
        ),
        benefits="50% tuition waiver and research internship.",
        description=(
            "The Digital Innovators Award supports master's students who show exceptional "
            "promise in creating cutting‑edge digital solutions. Recipients participate in "
            "a research internship at TUM's Digital Innovation Lab."
        ),
        link="https://www.tum.de/digital-innovators-award",
        tags=("innovation", "digital", "research"),
    ),
)

FALLBACK_POSTS: tuple[BlogPost, ...] = (
    BlogPost(
        id="1",
        title="How to Write a Compelling Scholarship Essay",
        author="ScholarLink Team",
        date="2025-08-10",
        summary=(
            "Tips and tricks to craft a persuasive essay that stands out to scholarship "
            "committees."
        ),
        content=(
            "Scholarship essays often serve as the deciding factor in highly competitive award "
            "processes. Begin by understanding the question and tailoring your response to "
            "reflect the sponsor’s values. Use concrete examples to demonstrate your "
            "achievements and ambitions. Maintain a clear structure with an introduction, body, "
            "and conclusion, and don’t forget to proofread before submission."
        ),
    ),
    BlogPost(
        id="2",
        title="Top Mistakes Scholarship Applicants Make",
        author="Jane Doe",
        date="2025-07-25",
        summary="Avoid these common pitfalls to improve your chances of securing funding.",
        content=(
            "From missing deadlines to failing to meet eligibility criteria, applicants often "
            "sabotage their chances. Always read the requirements carefully, plan ahead to "
            "gather necessary documents, and tailor each application to the specific "
            "scholarship. Submitting generic applications or neglecting to follow instructions "
            "can cost you the opportunity."
        ),
    ),
)


def fallback_scholarships() -> list[Scholarship]:
    return list(FALLBACK_SCHOLARSHIPS)


def fallback_posts() -> list[BlogPost]:
    return list(FALLBACK_POSTS)
