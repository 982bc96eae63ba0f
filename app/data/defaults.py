# app/data/defaults.py
# Seed data loaded on first startup.

DEFAULT_METRIC_KEYS = [
    "outreaches",
    "live_links",
    "high_da_links",
    "content_distribution",
    "new_blogs",
    "blog_optimizations",
    "top_5_keywords",
]

default_metrics = [
    {"key": "outreaches", "display_name": "Monthly Outreaches", "description": "Number of outreach emails sent per month", "unit": "emails"},
    {"key": "live_links", "display_name": "Live Links", "description": "Number of successfully acquired backlinks", "unit": "links"},
    {"key": "high_da_links", "display_name": "High DA Backlinks (90+)", "description": "Backlinks from high domain authority sites", "unit": "links"},
    {"key": "content_distribution", "display_name": "Content Distribution", "description": "Number of content pieces distributed across channels", "unit": "pieces"},
    {"key": "new_blogs", "display_name": "New Blog Contributions", "description": "Number of new blog posts created", "unit": "posts"},
    {"key": "blog_optimizations", "display_name": "Blog Optimizations", "description": "Number of existing blog posts optimized", "unit": "posts"},
    {"key": "top_5_keywords", "display_name": "Top 5 Ranking Keywords", "description": "Keywords ranking in top 5 positions", "unit": "keywords"},
]

default_roles = [
    {"name": "SEO Analyst", "description": "Entry-level SEO professional handling basic optimization tasks"},
    {"name": "SEO Specialist", "description": "Mid-level SEO professional with specialized skills"},
    {"name": "Content Writer", "description": "Professional focused on content creation and optimization"},
    {"name": "Link Building Specialist", "description": "Professional specialized in link acquisition strategies"},
    {"name": "Technical SEO Specialist", "description": "Professional focused on technical SEO implementations"},
    {"name": "SEO Manager", "description": "Senior professional managing SEO teams and strategies"},
    {"name": "Digital Marketing Specialist", "description": "Professional handling broader digital marketing tasks"},
]

# (metric_key, role, monthly_target, annual_target)
default_targets = [
    ("outreaches", "SEO Analyst", 525, 6825),
    ("live_links", "SEO Analyst", 15, 195),
    ("high_da_links", "SEO Analyst", 3, 39),
    ("content_distribution", "SEO Analyst", 8, 104),
    ("new_blogs", "SEO Analyst", 10, 130),
    ("blog_optimizations", "SEO Analyst", 5, 65),
    ("top_5_keywords", "SEO Analyst", 3, 39),
    ("outreaches", "SEO Specialist", 400, 5200),
    ("live_links", "SEO Specialist", 12, 156),
    ("high_da_links", "SEO Specialist", 2, 26),
    ("content_distribution", "SEO Specialist", 6, 78),
    ("new_blogs", "SEO Specialist", 8, 104),
    ("blog_optimizations", "SEO Specialist", 4, 52),
    ("top_5_keywords", "SEO Specialist", 2, 26),
]
