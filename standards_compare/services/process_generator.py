"""
Process guidance generator - canned procedural guidance from fixed templates.

The text is assembled from six sections: header, approach, phases, key
activities, deliverables and recommendations. Output is deterministic for
a given (project type, scale, standard).
"""
from typing import Dict, List, Optional, Tuple

from standards_compare.models.guidance import ProjectScale, ProjectType
from standards_compare.models.standard import Standard

RULE = "=" * 40
SUBRULE = "-" * 40

ApproachKey = Tuple[ProjectType, Optional[ProjectScale], Optional[str]]

# (type, scale, standard key); None means any
APPROACHES: Dict[ApproachKey, str] = {
    (ProjectType.SOFTWARE, ProjectScale.SMALL, "PMBOK"): (
        "For this small-scale software project, an Agile-aligned approach following PMBOK's "
        "principles fits best. Work in iterations of 1-2 weeks with lightweight documentation "
        "and frequent stakeholder feedback, delivering working software early while continuous "
        "integration and testing protect quality."
    ),
    (ProjectType.SOFTWARE, ProjectScale.SMALL, "PRINCE2"): (
        "A tailored PRINCE2 approach with simplified stage boundaries suits this small software "
        "project. Keep the seven themes (Business Case, Organization, Quality, Plans, Risk, Change, "
        "Progress) but streamline the processes: 2-3 management stages with weekly checkpoints, "
        "concentrating on a controlled start-up and delivery."
    ),
    (ProjectType.SOFTWARE, ProjectScale.SMALL, "ISO21502"): (
        "Following ISO 21502 guidance for small projects, set up a streamlined governance "
        "structure with clear roles. Put communication and stakeholder engagement first while "
        "keeping processes light, and agree clear success criteria aligned with organizational "
        "objectives."
    ),
    (ProjectType.SOFTWARE, ProjectScale.MEDIUM, "PMBOK"): (
        "A hybrid approach that combines PMBOK knowledge areas with agile practices is ideal. Use "
        "integration, scope and quality management alongside agile iterations, plan for 4-6 "
        "releases, and keep risk management and stakeholder communication in step with delivery."
    ),
    (ProjectType.SOFTWARE, ProjectScale.LARGE, "PMBOK"): (
        "This large-scale software initiative calls for comprehensive PMBOK application across all "
        "knowledge areas: formal program management with several work streams, rigorous change "
        "control, extensive stakeholder management, and phased releases with risk mitigation and "
        "quality assurance at every stage."
    ),
    (ProjectType.CONSTRUCTION, ProjectScale.SMALL, "PRINCE2"): (
        "Small construction projects do well under PRINCE2's structured framework. Use clear "
        "stage gates (Planning, Foundation, Build, Handover) with emphasis on quality control and "
        "supplier management; weekly progress reviews keep schedule and cost under control."
    ),
    (ProjectType.CONSTRUCTION, ProjectScale.MEDIUM, "PRINCE2"): (
        "For medium-scale construction, apply the full PRINCE2 method with defined management "
        "stages. Project Board oversight, detailed plans for each construction phase and rigorous "
        "inspection points provide governance, with particular attention to specialist "
        "subcontractors and material procurement."
    ),
    (ProjectType.CONSTRUCTION, ProjectScale.LARGE, "PRINCE2"): (
        "Large construction projects need comprehensive PRINCE2 governance with several "
        "authorization points. Structure the work into Design, Procurement, Foundation, "
        "Structure, Finishing and Commissioning stages with formal gate reviews, and manage safety, "
        "regulatory and supply chain risk explicitly."
    ),
    (ProjectType.CONSTRUCTION, None, "PMBOK"): (
        "Construction projects align well with PMBOK's predictive approach. Emphasize scope "
        "definition, detailed scheduling (CPM/PERT), cost estimation and control, quality "
        "inspections and procurement of materials and subcontractors. Strong integration "
        "management coordinates the many specialties involved."
    ),
    (ProjectType.RESEARCH, ProjectScale.SMALL, "ISO21502"): (
        "Small research projects benefit from ISO 21502's flexible framework with emphasis on "
        "stakeholder engagement and knowledge management. Work in iterative cycles (literature "
        "review, methodology, data collection, analysis) with regular peer reviews, keeping "
        "research integrity and documentation standards high."
    ),
    (ProjectType.RESEARCH, ProjectScale.MEDIUM, "ISO21502"): (
        "Medium-scale research needs ISO 21502's fuller governance with strong data management "
        "and quality assurance. Define research phases with validation gates and ethical review "
        "checkpoints, build collaborative team structures, and plan for reproducibility and "
        "knowledge transfer."
    ),
    (ProjectType.RESEARCH, ProjectScale.LARGE, "ISO21502"): (
        "Large research initiatives need a full ISO 21502 implementation with multi-stakeholder "
        "governance. Run it as a program of research streams under a steering committee with "
        "regular publication milestones, managing risk to research validity, data security and "
        "intellectual property."
    ),
    (ProjectType.INFRASTRUCTURE, ProjectScale.LARGE, None): (
        "Large infrastructure projects require rigorous planning and execution whichever standard "
        "is used: multi-year phased delivery, extensive stakeholder management (government, "
        "public, contractors), regulatory compliance, environmental impact management and public "
        "safety, all under strong program governance."
    ),
    (ProjectType.MARKETING, ProjectScale.SMALL, "PMBOK"): (
        "Small marketing campaigns work well with PMBOK's iterative approach adapted for creative "
        "work. Manage scope through campaign objectives, time through launch dates and stakeholders "
        "across the creative team, clients and media partners; keep processes light but hold "
        "quality control for brand consistency."
    ),
}

PHASES: Dict[Tuple[ProjectType, Optional[str]], List[str]] = {
    (ProjectType.SOFTWARE, "PRINCE2"): [
        "Starting Up: project brief, team appointment, initial risk assessment",
        "Initiating: Project Initiation Documentation (PID), baselines",
        "Delivery Stages: sprint planning, development iterations, testing cycles",
        "Closing: user acceptance, deployment, lessons learned, project closure",
    ],
    (ProjectType.SOFTWARE, None): [
        "Initiation: requirements gathering, feasibility study, team formation",
        "Planning: architecture design, sprint planning, resource allocation",
        "Execution: iterative development, continuous integration, code reviews",
        "Monitoring & Control: daily standups, sprint reviews, quality assurance",
        "Closure: UAT, deployment, documentation, post-launch support",
    ],
    (ProjectType.CONSTRUCTION, "PRINCE2"): [
        "Pre-Project: feasibility, site assessment, preliminary design",
        "Initiation: detailed design, permits, contractor selection",
        "Foundation Stage: site preparation, foundation work, inspections",
        "Structure Stage: main construction, quality checkpoints, safety audits",
        "Finishing Stage: interior work, systems installation, final inspections",
        "Handover: commissioning, documentation, defect liability period",
    ],
    (ProjectType.CONSTRUCTION, None): [
        "Concept: requirements, site selection, feasibility analysis",
        "Design: architectural and engineering design, permits, approvals",
        "Procurement: contractor bidding, material sourcing, contract negotiation",
        "Construction: foundation, structure, MEP systems, finishes",
        "Commissioning: testing, inspections, certification, handover",
    ],
    (ProjectType.RESEARCH, None): [
        "Proposal: research question, literature review, methodology design",
        "Planning: protocol development, ethical approval, resource allocation",
        "Data Collection: experiments or surveys, data gathering, quality checks",
        "Analysis: data processing, statistical analysis, validation",
        "Dissemination: writing, peer review, publication, presentation",
    ],
    (ProjectType.INFRASTRUCTURE, None): [
        "Planning: needs assessment, environmental impact, stakeholder engagement",
        "Design: detailed engineering, regulatory approvals, funding",
        "Procurement: major contracts, equipment sourcing, partnerships",
        "Construction: phased delivery, safety management, public communication",
        "Commissioning: testing, training, phased handover, warranty period",
    ],
    (ProjectType.MARKETING, None): [
        "Strategy: campaign objectives, audience research, creative brief",
        "Creative Development: concepts, design, content production",
        "Pre-Launch: media planning, channel setup, test campaigns",
        "Execution: launch, multi-channel activation, monitoring",
        "Optimization: performance analysis, A/B testing, adjustments",
        "Evaluation: ROI analysis, reporting, documented insights",
    ],
}

SCALE_ACTIVITIES: Dict[ProjectScale, List[str]] = {
    ProjectScale.SMALL: [
        "Weekly team sync meetings (30 min)",
        "Bi-weekly stakeholder updates",
        "Lightweight documentation (essentials only)",
        "Rapid decision-making",
    ],
    ProjectScale.MEDIUM: [
        "Weekly steering committee meetings",
        "Bi-weekly detailed progress reports",
        "Monthly risk review sessions",
        "Formal change control process",
    ],
    ProjectScale.LARGE: [
        "Weekly program management office (PMO) coordination",
        "Bi-weekly executive steering committee",
        "Monthly comprehensive status reporting",
        "Formal gate reviews at phase transitions",
        "Dedicated risk management and quality assurance teams",
    ],
}

TYPE_ACTIVITIES: Dict[ProjectType, List[str]] = {
    ProjectType.SOFTWARE: [
        "Daily standups (15 min)",
        "Sprint planning and retrospectives",
        "Code reviews and pair programming",
        "Automated testing and CI/CD pipelines",
    ],
    ProjectType.CONSTRUCTION: [
        "Daily site safety briefings",
        "Weekly subcontractor coordination",
        "Regular quality inspections",
        "Material delivery scheduling",
    ],
    ProjectType.RESEARCH: [
        "Regular peer review sessions",
        "Data validation and verification",
        "Literature updates and methodology reviews",
        "Conference presentations and publications",
    ],
    ProjectType.INFRASTRUCTURE: [
        "Public consultation sessions",
        "Regulatory compliance reporting",
        "Environmental monitoring",
        "Multi-agency coordination meetings",
    ],
    ProjectType.MARKETING: [
        "Creative review sessions",
        "Campaign performance monitoring",
        "Social media engagement tracking",
        "A/B testing and optimization",
    ],
}

DELIVERABLES: Dict[ProjectType, List[str]] = {
    ProjectType.SOFTWARE: [
        "Working software with its source code repository",
        "Technical documentation (API docs, architecture diagrams)",
        "User documentation and training materials",
        "Test results and quality assurance reports",
        "Deployment guide and release notes",
        "Project closure report and lessons learned",
    ],
    ProjectType.CONSTRUCTION: [
        "Completed facility or structure meeting specifications",
        "As-built drawings and documentation",
        "Quality inspection certificates",
        "Operations and maintenance manuals",
        "Warranty documentation",
        "Final project report and lessons learned",
    ],
    ProjectType.RESEARCH: [
        "Research data sets with metadata",
        "Papers in peer-reviewed journals",
        "Technical reports and white papers",
        "Conference posters and slides",
        "Research protocol and methodology documentation",
        "Knowledge transfer materials",
    ],
    ProjectType.INFRASTRUCTURE: [
        "Operational infrastructure asset",
        "Engineering documentation",
        "Environmental compliance reports",
        "Training programs for operators",
        "Public communication materials",
        "Asset management plan",
    ],
    ProjectType.MARKETING: [
        "Campaign creative assets (video, graphics, copy)",
        "Multi-channel campaign execution",
        "Performance analytics dashboard",
        "Campaign ROI report",
        "Customer insights and learnings",
        "Brand asset library",
    ],
}

SCALE_RECOMMENDATIONS: Dict[ProjectScale, List[str]] = {
    ProjectScale.SMALL: [
        "Keep processes lean and avoid over-engineering",
        "Empower the team to make quick decisions",
        "Favor delivered results over documentation",
    ],
    ProjectScale.MEDIUM: [
        "Balance formality with agility",
        "Govern properly without bureaucracy",
        "Plan for scalability and future growth",
    ],
    ProjectScale.LARGE: [
        "Establish a strong PMO for coordination",
        "Invest in stakeholder management and communication",
        "Plan for complexity and interdependencies",
    ],
}

TYPE_RECOMMENDATIONS: Dict[ProjectType, List[str]] = {
    ProjectType.SOFTWARE: [
        "Adopt DevOps practices",
        "Prioritize user feedback and iterative improvement",
    ],
    ProjectType.CONSTRUCTION: [
        "Never compromise on safety",
        "Keep a buffer for weather and supply delays",
    ],
    ProjectType.RESEARCH: [
        "Document everything; reproducibility is key",
        "Allow time for peer review and revisions",
    ],
    ProjectType.INFRASTRUCTURE: [
        "Engage the public and stakeholders early and often",
        "Plan for long-term operations from day one",
    ],
    ProjectType.MARKETING: [
        "Stay ready to pivot based on data",
        "Test early and often before full launch",
    ],
}

STANDARD_RECOMMENDATIONS: Dict[str, List[str]] = {
    "PMBOK": [
        "Review the PMBOK performance domains for comprehensive coverage",
        "Tailor processes to the project's specific needs",
    ],
    "PRINCE2": [
        "Use the seven PRINCE2 themes as a health check throughout",
        "Confirm continued business justification at each stage",
    ],
    "ISO21502": [
        "Align project objectives with organizational strategy",
        "Foster stakeholder engagement at all levels",
    ],
}


def _block(title: str, lines: List[str]) -> str:
    return "\n".join([title, SUBRULE, *lines])


def _numbered(items: List[str]) -> List[str]:
    return [f"{number}. {item}" for number, item in enumerate(items, start=1)]


def _bulleted(items: List[str]) -> List[str]:
    return [f"- {item}" for item in items]


def generate_header(project_type: ProjectType, scale: ProjectScale, standard: Standard) -> str:
    return "\n".join([
        "RECOMMENDED PROCESS SUMMARY",
        RULE,
        "",
        f"Project Type: {project_type.label}",
        f"Project Scale: {scale.label}",
        f"Preferred Standard: {standard.title}",
    ])


def select_approach(project_type: ProjectType, scale: ProjectScale, standard: Standard) -> str:
    """Most specific template wins; otherwise a generic paragraph."""
    for key in (
        (project_type, scale, standard.key),
        (project_type, None, standard.key),
        (project_type, scale, None),
    ):
        if key in APPROACHES:
            return APPROACHES[key]
    return (
        f"This project will follow {standard.title} principles adapted to the "
        f"{scale.label.lower()} {project_type.label.lower()} context. The approach balances "
        f"formality with flexibility, ensuring proper governance while enabling efficient delivery."
    )


def generate_approach(project_type: ProjectType, scale: ProjectScale, standard: Standard) -> str:
    return _block("RECOMMENDED APPROACH", [select_approach(project_type, scale, standard)])


def generate_phases(project_type: ProjectType, standard: Standard) -> str:
    phases = PHASES.get((project_type, standard.key)) or PHASES[(project_type, None)]
    return _block("PROJECT PHASES", _numbered(phases))


def generate_key_activities(project_type: ProjectType, scale: ProjectScale) -> str:
    activities = SCALE_ACTIVITIES[scale] + TYPE_ACTIVITIES[project_type]
    return _block("KEY ACTIVITIES", _bulleted(activities))


def generate_deliverables(project_type: ProjectType) -> str:
    return _block("KEY DELIVERABLES", _bulleted(DELIVERABLES[project_type]))


def generate_recommendations(project_type: ProjectType, scale: ProjectScale, standard: Standard) -> str:
    items = (
        SCALE_RECOMMENDATIONS[scale]
        + TYPE_RECOMMENDATIONS[project_type]
        + STANDARD_RECOMMENDATIONS.get(standard.key, [])
    )
    lines = _bulleted(items) + [
        "",
        f"Note: this is a tailored recommendation based on {standard.title}.",
        f"For detailed guidance, consult the full {standard.title} documentation.",
    ]
    return _block("RECOMMENDATIONS", lines)


def generate(project_type: ProjectType, scale: ProjectScale, standard: Standard) -> str:
    sections = [
        generate_header(project_type, scale, standard),
        generate_approach(project_type, scale, standard),
        generate_phases(project_type, standard),
        generate_key_activities(project_type, scale),
        generate_deliverables(project_type),
        generate_recommendations(project_type, scale, standard),
    ]
    return "\n\n".join(sections)
