# app/data/recommendations.py
# Canned action-item text: metric key -> category name -> title + ordered recommendations.

DEFAULT_RECOMMENDATIONS = {
    "outreaches": {
        "critical": {
            "title": "Outreach Performance Critical - Immediate Action Required",
            "recommendations": [
                "Review and update outreach templates for better engagement",
                "Analyze competitor outreach strategies and adapt successful approaches",
                "Implement automated outreach tools to increase volume",
                "Schedule daily outreach blocks (2-3 hours minimum)",
                "Create personalized outreach sequences for different prospect types",
                "Review and expand prospect database with high-quality targets",
            ],
        },
        "bad": {
            "title": "Outreach Performance Below Target - Needs Improvement",
            "recommendations": [
                "A/B test different subject lines and email templates",
                "Increase daily outreach target by 25%",
                "Focus on building relationships before pitching",
                "Research prospects more thoroughly for personalization",
                "Follow up consistently with previous outreach attempts",
            ],
        },
        "target": {
            "title": "Outreach Performance On Track - Maintain Momentum",
            "recommendations": [
                "Continue current outreach strategies",
                "Document successful outreach templates for team sharing",
                "Explore new outreach channels (LinkedIn, Twitter, etc.)",
                "Build relationships with key industry contacts",
            ],
        },
        "good": {
            "title": "Excellent Outreach Performance - Scale Success",
            "recommendations": [
                "Share successful strategies with team members",
                "Mentor other analysts on outreach best practices",
                "Explore premium outreach opportunities",
                "Focus on building long-term industry relationships",
            ],
        },
    },
    "live_links": {
        "critical": {
            "title": "Link Acquisition Critical - Immediate Intervention Required",
            "recommendations": [
                "Review outreach-to-link conversion rates and identify bottlenecks",
                "Focus on relationship building before link requests",
                "Improve content quality to increase link-worthy assets",
                "Analyze successful link placements and replicate approach",
                "Consider guest posting opportunities for easier link acquisition",
                "Schedule weekly follow-ups with promising prospects",
            ],
        },
        "bad": {
            "title": "Link Acquisition Below Target - Strategy Review Needed",
            "recommendations": [
                "Analyze rejection reasons and address common objections",
                "Improve value proposition in outreach messages",
                "Focus on building relationships before asking for links",
                "Create more linkable assets (infographics, studies, tools)",
                "Target lower-competition, niche-specific opportunities",
            ],
        },
        "target": {
            "title": "Link Acquisition On Target - Optimize for Quality",
            "recommendations": [
                "Maintain current link building strategies",
                "Focus on acquiring higher authority links",
                "Build relationships for future link opportunities",
                "Document successful link building tactics",
            ],
        },
        "good": {
            "title": "Outstanding Link Acquisition - Maximize Impact",
            "recommendations": [
                "Focus on high-authority, industry-leading publications",
                "Develop thought leadership content for premium placements",
                "Build strategic partnerships for ongoing link opportunities",
                "Share successful link building strategies with team",
            ],
        },
    },
    "high_da_links": {
        "critical": {
            "title": "High DA Link Acquisition Critical - Strategic Overhaul Needed",
            "recommendations": [
                "Research and target top-tier publications in your industry",
                "Develop thought leadership content worthy of high-DA sites",
                "Build relationships with editors at major publications",
                "Create comprehensive, data-driven content that attracts high-DA links",
                "Consider HARO (Help a Reporter Out) for media opportunities",
                "Analyze competitors' high-DA backlinks for targeting ideas",
            ],
        },
        "bad": {
            "title": "High DA Links Below Target - Quality Focus Required",
            "recommendations": [
                "Prioritize relationship building with high-authority site editors",
                "Create exceptional, newsworthy content",
                "Participate in industry events and conferences for networking",
                "Develop original research and data studies",
                "Focus on fewer, higher-quality outreach attempts",
            ],
        },
        "target": {
            "title": "High DA Link Performance On Track - Maintain Standards",
            "recommendations": [
                "Continue targeting high-authority publications",
                "Maintain relationships with key industry contacts",
                "Focus on creating exceptional, shareable content",
                "Document successful high-DA link strategies",
            ],
        },
        "good": {
            "title": "Exceptional High DA Link Performance - Industry Leadership",
            "recommendations": [
                "Establish yourself as a thought leader in the industry",
                "Speak at conferences and industry events",
                "Develop strategic partnerships with major publications",
                "Mentor team members on high-DA link acquisition",
            ],
        },
    },
    "content_distribution": {
        "critical": {
            "title": "Content Distribution Critical - Multi-Channel Strategy Needed",
            "recommendations": [
                "Audit current distribution channels and identify gaps",
                "Develop a comprehensive content distribution calendar",
                "Automate social media posting with scheduling tools",
                "Build email lists for content promotion",
                "Engage with industry communities and forums",
                "Repurpose content for different platforms and formats",
            ],
        },
        "bad": {
            "title": "Content Distribution Below Target - Channel Expansion Required",
            "recommendations": [
                "Increase posting frequency across all channels",
                "Explore new distribution platforms (Reddit, Quora, industry forums)",
                "Build relationships with influencers for content amplification",
                "Create platform-specific content variations",
                "Implement content syndication strategies",
            ],
        },
        "target": {
            "title": "Content Distribution On Track - Optimize Engagement",
            "recommendations": [
                "Focus on improving engagement rates on existing channels",
                "Analyze best-performing content and replicate success",
                "Build community around your content",
                "Experiment with new content formats",
            ],
        },
        "good": {
            "title": "Excellent Content Distribution - Maximize Reach",
            "recommendations": [
                "Develop strategic partnerships for content amplification",
                "Create viral-worthy content campaigns",
                "Build thought leadership through consistent, valuable content",
                "Share distribution strategies with team members",
            ],
        },
    },
    "new_blogs": {
        "critical": {
            "title": "Blog Content Creation Critical - Production Ramp-Up Required",
            "recommendations": [
                "Develop a structured content calendar with daily writing goals",
                "Use content templates to speed up creation process",
                "Repurpose existing content into new blog formats",
                "Collaborate with subject matter experts for faster content creation",
                "Implement content batching techniques",
                "Consider outsourcing research to focus on writing",
            ],
        },
        "bad": {
            "title": "Blog Creation Below Target - Workflow Optimization Needed",
            "recommendations": [
                "Streamline content creation workflow",
                "Create content templates for common topics",
                "Batch similar content creation tasks",
                "Set daily writing goals and track progress",
                "Use AI tools to assist with research and outlining",
            ],
        },
        "target": {
            "title": "Blog Creation On Track - Quality Focus",
            "recommendations": [
                "Maintain current content creation pace",
                "Focus on improving content quality and depth",
                "Optimize content for search engines",
                "Track content performance and iterate",
            ],
        },
        "good": {
            "title": "Outstanding Blog Production - Content Leadership",
            "recommendations": [
                "Focus on creating comprehensive, authoritative content",
                "Develop content series and pillar pages",
                "Share content creation best practices with team",
                "Explore advanced content formats (interactive, multimedia)",
            ],
        },
    },
    "blog_optimizations": {
        "critical": {
            "title": "Blog Optimization Critical - Technical SEO Audit Required",
            "recommendations": [
                "Conduct comprehensive technical SEO audit of existing content",
                "Prioritize optimization of highest-traffic pages first",
                "Update meta titles, descriptions, and header tags",
                "Improve internal linking structure",
                "Optimize page loading speeds and mobile responsiveness",
                "Add schema markup to improve search visibility",
            ],
        },
        "bad": {
            "title": "Blog Optimization Below Target - Systematic Approach Needed",
            "recommendations": [
                "Create optimization checklist and follow systematically",
                "Focus on pages with highest potential impact",
                "Update outdated content with fresh information",
                "Improve keyword targeting and content structure",
                "Add relevant internal and external links",
            ],
        },
        "target": {
            "title": "Blog Optimization On Track - Maintain Quality",
            "recommendations": [
                "Continue systematic optimization approach",
                "Monitor optimization impact on search rankings",
                "Focus on user experience improvements",
                "Document successful optimization strategies",
            ],
        },
        "good": {
            "title": "Excellent Blog Optimization - Advanced Techniques",
            "recommendations": [
                "Implement advanced SEO techniques (topic clusters, semantic SEO)",
                "Focus on featured snippet optimization",
                "Develop comprehensive content hubs",
                "Share optimization expertise with team members",
            ],
        },
    },
    "top_5_keywords": {
        "critical": {
            "title": "Keyword Rankings Critical - SEO Strategy Overhaul Required",
            "recommendations": [
                "Conduct comprehensive keyword research and competitive analysis",
                "Audit current content for keyword optimization opportunities",
                "Develop targeted content for priority keywords",
                "Improve technical SEO foundation (site speed, mobile, crawlability)",
                "Build topical authority through comprehensive content coverage",
                "Analyze SERP features and optimize for featured snippets",
            ],
        },
        "bad": {
            "title": "Keyword Rankings Below Target - Focused Optimization Required",
            "recommendations": [
                "Prioritize optimization of pages closest to top 5 rankings",
                "Improve content quality and comprehensiveness",
                "Build more relevant backlinks to target pages",
                "Optimize for user intent and search experience",
                "Monitor competitor strategies and adapt successful tactics",
            ],
        },
        "target": {
            "title": "Keyword Rankings On Track - Maintain Momentum",
            "recommendations": [
                "Continue current keyword optimization strategies",
                "Monitor rankings closely and defend positions",
                "Expand content around successful keywords",
                "Build authority through consistent, quality content",
            ],
        },
        "good": {
            "title": "Outstanding Keyword Performance - Expand Dominance",
            "recommendations": [
                "Target more competitive, high-value keywords",
                "Develop comprehensive topic clusters",
                "Build thought leadership around key topics",
                "Share keyword strategy insights with team",
            ],
        },
    },
}
