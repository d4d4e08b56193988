"""README templates per archetype and prompt assembly."""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict

from ..analysis.repo_analysis import RepoAnalysis
from ..core.errors import ValidationError
from ..core.types import ArchetypeLabel, RepositoryFacts


class ArchetypeTemplate(BaseModel):
    """Display metadata and instruction block for one archetype."""
    model_config = ConfigDict(frozen=True)

    label: ArchetypeLabel
    name: str
    description: str
    icon: str
    instructions: str


COMPREHENSIVE_INSTRUCTIONS = """
Create a comprehensive README with ALL sections including:
1. Project title
2. Horizontal badge row (license, stars, forks, language, build status) - ALL ON ONE LINE
3. Detailed project overview with value proposition
4. Feature list with descriptions and checkboxes
5. Live demo links and screenshots section
6. Complete installation guide for multiple environments
7. Detailed usage examples with code snippets
8. API documentation if applicable
9. Configuration and environment variables
10. Testing instructions and coverage
11. Deployment guide for multiple platforms
12. Contributing guidelines with development setup
13. Roadmap and future plans
14. FAQ and troubleshooting
15. License and legal information
16. Acknowledgments and credits
17. Contact and support information

IMPORTANT: Ensure ALL badges are placed horizontally on a single line immediately after the title.
"""

STARTUP_INSTRUCTIONS = """
Create a startup-focused README emphasizing:
1. Project title with horizontal badge row (license, stars, demo status) - ALL ON ONE LINE
2. Problem statement and solution
3. Key features and benefits for users
4. Live demo and screenshots
5. Quick start guide for immediate value
6. User testimonials or social proof section
7. Monetization model if applicable
8. Market validation and metrics
9. Team information and background
10. Investor information if open source
11. Community and social media links

IMPORTANT: Place ALL badges horizontally on one line after the title.
"""

LIBRARY_INSTRUCTIONS = """
Create a library-focused README with:
1. Library title with horizontal badges (license, npm version, downloads, build) - ALL ON ONE LINE
2. Clear description of what the library does
3. Installation instructions for multiple package managers
4. Quick start examples with common use cases
5. Complete API documentation with parameters
6. Code examples for different scenarios
7. Browser and Node.js compatibility
8. TypeScript definitions if applicable
9. Performance benchmarks
10. Comparison with similar libraries
11. Contributing guidelines for library maintainers

IMPORTANT: Ensure badges are displayed horizontally in a single row.
"""

OPEN_SOURCE_INSTRUCTIONS = """
Create an open-source focused README with:
1. Project title with horizontal badges (license, contributors, build status) - ALL ON ONE LINE
2. Project mission and vision
3. Community guidelines and code of conduct
4. Detailed contributing instructions
5. Issue templates and bug reporting
6. Development environment setup
7. Testing and quality assurance
8. Release process and versioning
9. Community recognition and contributors
10. Governance and decision-making process
11. Sponsorship and funding information

IMPORTANT: Display all badges horizontally on one line.
"""

PORTFOLIO_INSTRUCTIONS = """
Create a portfolio-focused README showcasing:
1. Project title with horizontal badges (demo, license, tech stack) - ALL ON ONE LINE
2. Project overview and personal motivation
3. Technologies and skills demonstrated
4. Key features and innovative aspects
5. Live demo with multiple deployment links
6. Screenshots and visual demonstrations
7. Development process and challenges overcome
8. Lessons learned and skills gained
9. Future improvements and iterations
10. Related projects and portfolio links
11. Contact information and social profiles

IMPORTANT: Badges must be arranged horizontally on a single line.
"""

ACADEMIC_INSTRUCTIONS = """
Create an academic-focused README with:
1. Research title with horizontal badges (license, DOI, publication status) - ALL ON ONE LINE
2. Research abstract and objectives
3. Methodology and experimental design
4. Dataset description and sources
5. Results and findings summary
6. Installation for research reproduction
7. Code structure and algorithm explanation
8. Citation information and BibTeX
9. Related publications and papers
10. Acknowledgments to advisors and institutions
11. Future research directions

IMPORTANT: Display badges horizontally in one row after the title.
"""

ENTERPRISE_INSTRUCTIONS = """
Create an enterprise-focused README with:
1. Product title with horizontal badges (license, version, security status) - ALL ON ONE LINE
2. Business value proposition
3. Security and compliance information
4. Enterprise installation and deployment
5. Scalability and performance metrics
6. Integration with enterprise systems
7. Support and SLA information
8. Documentation and training resources
9. Change management and updates
10. Backup and disaster recovery
11. Vendor contact and procurement information

IMPORTANT: All badges should be on the same horizontal line.
"""

MINIMALIST_INSTRUCTIONS = """
Create a clean, minimalist README with only essentials:
1. Project title with essential horizontal badges (license, stars) - ALL ON ONE LINE
2. Brief project description (2-3 sentences)
3. Quick installation (1-2 commands)
4. Basic usage example
5. Link to documentation if exists
6. License information
7. Contact or issues link

Keep it clean, scannable, and under 100 lines. IMPORTANT: Badges must be horizontal.
"""

TEMPLATES: Dict[ArchetypeLabel, ArchetypeTemplate] = {
    template.label: template for template in [
        ArchetypeTemplate(
            label=ArchetypeLabel.COMPREHENSIVE,
            name="Comprehensive (All Sections)",
            description="Complete README with all possible sections - best for established projects",
            icon="📚",
            instructions=COMPREHENSIVE_INSTRUCTIONS,
        ),
        ArchetypeTemplate(
            label=ArchetypeLabel.STARTUP,
            name="Startup/MVP",
            description="Focus on product features, demo links, and user acquisition",
            icon="🚀",
            instructions=STARTUP_INSTRUCTIONS,
        ),
        ArchetypeTemplate(
            label=ArchetypeLabel.OPEN_SOURCE,
            name="Open Source Project",
            description="Emphasizes contribution guidelines, community, and collaboration",
            icon="🌟",
            instructions=OPEN_SOURCE_INSTRUCTIONS,
        ),
        ArchetypeTemplate(
            label=ArchetypeLabel.LIBRARY,
            name="Library/Package",
            description="API documentation, installation guides, and usage examples",
            icon="📦",
            instructions=LIBRARY_INSTRUCTIONS,
        ),
        ArchetypeTemplate(
            label=ArchetypeLabel.PORTFOLIO,
            name="Portfolio Project",
            description="Showcase skills, technologies used, and live demos",
            icon="💼",
            instructions=PORTFOLIO_INSTRUCTIONS,
        ),
        ArchetypeTemplate(
            label=ArchetypeLabel.ACADEMIC,
            name="Academic/Research",
            description="Research methodology, citations, and academic formatting",
            icon="🎓",
            instructions=ACADEMIC_INSTRUCTIONS,
        ),
        ArchetypeTemplate(
            label=ArchetypeLabel.ENTERPRISE,
            name="Enterprise/Corporate",
            description="Professional documentation with compliance and security focus",
            icon="🏢",
            instructions=ENTERPRISE_INSTRUCTIONS,
        ),
        ArchetypeTemplate(
            label=ArchetypeLabel.MINIMALIST,
            name="Minimalist",
            description="Clean, simple README with just the essentials",
            icon="✨",
            instructions=MINIMALIST_INSTRUCTIONS,
        ),
    ]
}

FORMATTING_REQUIREMENTS = """## IMPORTANT FORMATTING REQUIREMENTS:
- Place ALL badges on the SAME LINE horizontally, separated by spaces
- Example format: [![Badge1](url1)](link1) [![Badge2](url2)](link2) [![Badge3](url3)](link3)
- DO NOT place badges on separate lines or in a vertical list
- Include relevant badges for: license, build status, version, stars, forks, language, etc.
- Ensure the badges section appears right after the title

Make the README highly specific to this repository type, include relevant badges horizontally arranged, and ensure all sections are tailored to the detected technology stack and project complexity."""


AUTO_TEMPLATE = "auto"


def get_template(archetype: ArchetypeLabel) -> ArchetypeTemplate:
    """Look up the template for an archetype, defaulting to comprehensive."""
    return TEMPLATES.get(archetype, TEMPLATES[ArchetypeLabel.COMPREHENSIVE])


def parse_archetype(value: Optional[str]) -> Optional[ArchetypeLabel]:
    """Parse a template selector value.

    ``None``, an empty string and ``"auto"`` mean automatic detection.

    Raises:
        ValidationError: Unknown template id
    """
    if value is None or not value.strip() or value.strip().lower() == AUTO_TEMPLATE:
        return None
    try:
        return ArchetypeLabel(value.strip().lower())
    except ValueError:
        choices = ", ".join([AUTO_TEMPLATE] + [label.value for label in ArchetypeLabel])
        raise ValidationError(f"Unknown template '{value}'. Choose one of: {choices}") from None


def _timestamp(value) -> str:
    return value.strftime("%Y-%m-%dT%H:%M:%SZ") if value else "Unknown"


def _flag(value: bool) -> str:
    return "true" if value else "false"


def build_readme_prompt(
    facts: RepositoryFacts,
    archetype: ArchetypeLabel,
    analysis: RepoAnalysis
) -> str:
    """
    Build the single generation request for a repository.

    Args:
        facts: Repository facts
        archetype: Effective archetype
        analysis: Derived analysis values

    Returns:
        Prompt text
    """
    template = get_template(archetype)
    latest_release = facts.releases[0] if facts.releases else "No releases"
    contributors = (
        ", ".join(facts.contributors) if facts.contributors
        else "No contributors data available"
    )
    topics = ", ".join(facts.topics) if facts.topics else "None"

    return f"""Generate a {template.name} README.md file for the following GitHub repository. Make it highly relevant to the repository type and technology stack:

## Repository Information:
- **Name**: {facts.name}
- **Description**: {facts.description or "No description provided"}
- **Author**: {facts.owner}
- **URL**: {facts.html_url}
- **Primary Language**: {facts.language or "Unknown"}
- **Language Distribution**: {analysis.language_distribution}
- **Tech Stack**: {analysis.tech_stack}
- **Homepage**: {facts.homepage or "N/A"}
- **Stars**: {facts.stargazers_count}
- **Forks**: {facts.forks_count}
- **Open Issues**: {facts.open_issues_count}
- **Created**: {_timestamp(facts.created_at)}
- **Last Updated**: {_timestamp(facts.updated_at)}
- **Latest Release**: {latest_release}
- **License**: {facts.license_name or "Not specified"}
- **Topics**: {topics}
- **Contributors**: {contributors}

## Technical Analysis:
- **Complexity**: {analysis.complexity} project ({analysis.file_count} files)
- **Installation Method**: {analysis.installation_method or "Not detected"}
- **Common Commands**: {analysis.run_commands or "Not detected"}
- **Has Tests**: {_flag(analysis.has_tests)}
- **Has CI/CD**: {_flag(analysis.has_ci)}
- **Has Documentation**: {_flag(analysis.has_docs)}
- **Is Monorepo**: {_flag(analysis.is_monorepo)}
- **Has Docker**: {_flag(analysis.has_docker)}
- **Has API**: {_flag(analysis.has_api)}
- **Frameworks**: {", ".join(analysis.frameworks) or "None detected"}
- **Deployment**: {", ".join(analysis.deployment) or "Not specified"}
- **Actively Maintained**: {_flag(analysis.is_actively_maintained)}

{template.instructions}

{FORMATTING_REQUIREMENTS}"""
