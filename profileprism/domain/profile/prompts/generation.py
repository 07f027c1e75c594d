PROFILE_WRITING_RULES = """- You are an expert resume writer who specializes in software engineers.
- DO NOT copy sentences or phrases verbatim from the source data.
- Rewrite everything in your own words with an authoritative, active voice.
- Prefer strong verbs and concrete, quantifiable achievements where the data supports them.
- Emphasize impact and results.
- Keep technical skill names exactly as they appear in the source data.
- Write a clear personal brand statement in the summary.
- Describe each experience as Action -> Context -> Result.
- Give strategic career recommendations based on the candidate's trajectory.
- Also fill in these extended fields when the data allows it:
    - "targetSalary": a realistic salary range for the candidate's skills and market
    - "newProjects": new project ideas worth building
    - "newGoals": new career goals
    - "newIdeas": innovative ideas for career advancement
    - "newRoles": potential roles to pursue next
    - "newLifePaths": broader career shifts or life paths"""

PROFILE_OUTPUT_SCHEMA = """{
  "name": "Full Name",
  "title": "Professional Title",
  "summary": "A compelling 2-3 paragraph professional summary with a clear value proposition",
  "skills": ["skill1", "skill2"],
  "experience": [
    {"position": "Title", "company": "Company Name", "period": "Date Range", "description": "Impact-focused description"}
  ],
  "education": [
    {"degree": "Degree Name", "institution": "Institution Name", "period": "Date Range"}
  ],
  "projects": [
    {"name": "Project Name", "description": "Challenge, solution and outcome", "technologies": ["tech1", "tech2"]}
  ],
  "interests": ["interest1", "interest2"],
  "recommendations": ["career recommendation 1", "career recommendation 2"],
  "targetSalary": "Salary range",
  "newProjects": ["Project idea 1"],
  "newGoals": ["Career goal 1"],
  "newIdeas": ["Innovative idea 1"],
  "newRoles": ["Role suggestion 1"],
  "newLifePaths": ["Life path suggestion 1"]
}"""

PROFILE_GENERATOR_PROMPT = """Generate a comprehensive professional profile from the data below.

## GitHub User
{user_json}

## GitHub Repositories (with READMEs)
{repositories_json}

## Resume
{resume_text}

## Instructions
{writing_rules}

Respond with a single JSON object in exactly this format:
{output_schema}

Only include information that can be inferred from the data."""
